# linkextractor/extractor/link_extractor.py
# Responsibility: Find every resource an HTML document links to and resolve it against the document base URL.

import threading
from pathlib import Path
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from linkextractor.config.log_config import get_logger
from linkextractor.config.settings import settings
from linkextractor.errors import MalformedBaseUrl, UnresolvableLink
from linkextractor.extractor.catalog import URL_ATTRIBUTE_NAMES, UrlPolicy, url_attribute_policy
from linkextractor.extractor.tree import find_base_href, iter_attributes, owner_document
from linkextractor.extractor.urls import resolve_url, strip_html_whitespace

log = get_logger("LinkExtractor")

# html.parser keeps the last of duplicate attributes; HTML5 keeps the first.
PARSER_OPTIONS = {
    "html.parser": {"on_duplicate_attribute": "ignore"},
}


class LinkExtractor:
    """
    Figures out which resources an HTML document links to.

    The extractor can run on the whole document or on any element in it,
    e.g. only the links inside a previously located article. Even for a
    sub element, the first <base href> of the entire document is applied
    when resolving relative URLs.
    """

    def __init__(self, root: Tag, base_url: str = ""):
        """
        Args:
            root (Tag): A BeautifulSoup document, or any element inside one, used as scan root.
            base_url (str): URL of the document, to resolve relative URLs against.

        Raises:
            MalformedBaseUrl: If the document's <base href> cannot be resolved.
        """
        self._root = root
        self._document = owner_document(root)
        self._base_url = self._effective_base_url(base_url)

        self._extracted: Optional[Tuple[str, ...]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_html(
        cls,
        markup: Union[str, bytes],
        base_url: str = "",
        features: Optional[str] = None,
    ) -> "LinkExtractor":
        """
        Parses markup and builds an extractor over the whole document.

        Args:
            markup (str | bytes): HTML source.
            base_url (str): URL of the document.
            features (str, optional): BeautifulSoup tree builder. Defaults to settings.PARSER.FEATURES.
        """
        features = features or settings.PARSER.FEATURES
        soup = BeautifulSoup(markup, features, **PARSER_OPTIONS.get(features, {}))
        return cls(soup, base_url)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        base_url: str = "",
        features: Optional[str] = None,
    ) -> "LinkExtractor":
        """
        Reads an HTML file and builds an extractor over it.
        The file is read as bytes so BeautifulSoup can detect its encoding.
        """
        return cls.from_html(Path(path).read_bytes(), base_url, features)

    @property
    def root(self) -> Tag:
        return self._root

    @property
    def document(self) -> Tag:
        return self._document

    @property
    def base_url(self) -> str:
        """
        The URL relative links are resolved against, fixed at construction.
        """
        return self._base_url

    def extract(self) -> Tuple[str, ...]:
        """
        Gets all URLs the root links to, in document order.

        URLs are resolved against the base URL where possible; values that
        cannot be resolved are returned as found. The result is computed on
        the first call and the same tuple is returned afterwards.

        Returns:
            Tuple[str, ...]: Linked URLs, duplicates included.
        """
        if self._extracted is None:
            with self._lock:
                if self._extracted is None:
                    self._extracted = tuple(self._resolve(url) for url in self._raw_links())
                    log.debug(f"[LinkExtractor] Extracted {len(self._extracted)} links (base: {self._base_url!r})")
        return self._extracted

    def links_to(self, url: str) -> bool:
        """
        Checks if the document links to the given resource.

        Args:
            url (str): URL of a resource, resolved against the document base first.

        Returns:
            bool: True if the resolved URL is among the extracted links.
        """
        return self._resolve(url) in self.extract()

    def _effective_base_url(self, base_url: str) -> str:
        # The <base> element's position in the document is not validated.
        href = find_base_href(self._document)
        if href is None:
            return base_url

        try:
            resolved = resolve_url(strip_html_whitespace(href), base_url)
        except UnresolvableLink as e:
            log.warning(f"[LinkExtractor] Malformed base URL {href!r}: {e.reason}")
            raise MalformedBaseUrl(href, base_url) from e

        log.debug(f"[LinkExtractor] <base> overrides {base_url!r} with {resolved!r}")
        return resolved

    def _raw_links(self) -> List[str]:
        links = []
        for attribute in iter_attributes(self._root, URL_ATTRIBUTE_NAMES):
            policy = url_attribute_policy(attribute.name, attribute.element)
            if policy is None:
                continue

            value = strip_html_whitespace(attribute.value)
            if policy is UrlPolicy.REQUIRE_NON_EMPTY and not value:
                continue
            links.append(value)
        return links

    def _resolve(self, url: str) -> str:
        try:
            return resolve_url(url, self._base_url)
        except UnresolvableLink as e:
            log.debug(f"[LinkExtractor] Keeping unresolvable link {url!r}: {e.reason}")
            return url
