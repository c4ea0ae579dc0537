# linkextractor/errors.py
# Responsibility: Exception hierarchy shared by the extractor components.


class LinkExtractorError(Exception):
    """
    Base class for every error raised by this package.
    """


class UnresolvableLink(LinkExtractorError, ValueError):
    """
    A URL reference could not be parsed or resolved against its base.
    Raised by the resolution primitive; callers decide whether it is fatal.
    """

    def __init__(self, reference: str, base: str, reason: str = ""):
        self.reference = reference
        self.base = base
        self.reason = reason
        message = f"Cannot resolve {reference!r} against {base!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedBaseUrl(LinkExtractorError, ValueError):
    """
    The document base URL (caller supplied or taken from <base href>) is unusable.
    """

    def __init__(self, href: str, base_url: str):
        self.href = href
        self.base_url = base_url
        super().__init__(f"Cannot resolve <base href> {href!r} against document URL {base_url!r}")
