# linkextractor/extractor/urls.py
# Responsibility: HTML5 whitespace stripping and RFC 3986 reference resolution.

from urllib.parse import SplitResult, urlsplit, urlunsplit

from linkextractor.errors import UnresolvableLink

# https://www.w3.org/TR/html5/infrastructure.html#space-character
HTML_SPACE_CHARACTERS = " \t\n\f\r"


def strip_html_whitespace(value: str) -> str:
    """
    Strips leading and trailing HTML space characters. Internal whitespace is kept.
    """
    return value.strip(HTML_SPACE_CHARACTERS)


def _parse(url: str) -> SplitResult:
    parts = urlsplit(url)
    # Port is parsed lazily by urllib; touch it so an invalid one fails here.
    parts.port
    return parts


def remove_dot_segments(path: str) -> str:
    """
    Removes "." and ".." segments from a path (RFC 3986 section 5.2.4).
    """
    output = []
    for segment in path.split("/"):
        if segment == ".":
            continue
        if segment == "..":
            if output:
                output.pop()
            continue
        output.append(segment)

    if path.startswith("/") and (not output or output[0]):
        output.insert(0, "")
    if path.endswith(("/.", "/..")):
        output.append("")
    return "/".join(output)


def _merge(base: SplitResult, path: str) -> str:
    # RFC 3986 section 5.2.3
    if base.netloc and not base.path:
        return "/" + path
    return base.path[:base.path.rfind("/") + 1] + path


def resolve_url(reference: str, base: str) -> str:
    """
    Resolves a URL reference against a base URL (RFC 3986 section 5.2.2).

    Works for any scheme, not only the ones urllib knows to be hierarchical.
    Both strings are parsed first, so a malformed reference or base
    (unbalanced IPv6 brackets, non-numeric or out of range port) fails
    instead of being joined as-is.

    Args:
        reference (str): Raw URL reference, absolute or relative.
        base (str): Base URL to resolve against. May be empty.

    Returns:
        str: The resolved URL. The base fragment is never carried over.

    Raises:
        UnresolvableLink: If either string cannot be parsed.
    """
    try:
        b = _parse(base)
        r = _parse(reference)
    except ValueError as e:
        raise UnresolvableLink(reference, base, str(e)) from e

    if r.scheme:
        return urlunsplit((r.scheme, r.netloc, remove_dot_segments(r.path), r.query, r.fragment))

    if r.netloc:
        return urlunsplit((b.scheme, r.netloc, remove_dot_segments(r.path), r.query, r.fragment))

    if not r.path:
        query_defined = "?" in reference.split("#", 1)[0]
        query = r.query if query_defined else b.query
        return urlunsplit((b.scheme, b.netloc, b.path, query, r.fragment))

    if r.path.startswith("/"):
        path = remove_dot_segments(r.path)
    else:
        path = remove_dot_segments(_merge(b, r.path))
    return urlunsplit((b.scheme, b.netloc, path, r.query, r.fragment))
