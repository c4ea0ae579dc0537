# linkextractor/extractor/tree.py
# Responsibility: Read-only queries over a BeautifulSoup tree (document lookup, attribute scan).

from typing import AbstractSet, Iterator, NamedTuple, Optional

from bs4 import BeautifulSoup, Tag


class AttributeNode(NamedTuple):
    name: str
    value: str
    element: str


def owner_document(node: Tag) -> Tag:
    """
    Returns the document that owns the node.
    For a detached subtree this is its top-most ancestor.
    """
    if isinstance(node, BeautifulSoup):
        return node

    document = node
    for parent in node.parents:
        document = parent
    return document


def iter_elements(root: Tag) -> Iterator[Tag]:
    """
    Yields the root element (unless it is the document itself) and every
    descendant element, in document order.
    """
    if not isinstance(root, BeautifulSoup):
        yield root
    yield from root.find_all(True)


def _attribute_text(value) -> str:
    # Multi-valued attributes (class, rel, ...) come back as lists
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def find_base_href(document: Tag) -> Optional[str]:
    """
    Returns the raw href of the first <base href> element in document order.

    Args:
        document (Tag): Node to search, normally the owning document.

    Returns:
        Optional[str]: The unprocessed href value, or None if there is none.
    """
    for element in iter_elements(document):
        if element.name == "base" and element.has_attr("href"):
            return _attribute_text(element["href"])
    return None


def iter_attributes(root: Tag, names: AbstractSet[str]) -> Iterator[AttributeNode]:
    """
    Yields every attribute in the subtree whose name is one of `names`.

    Order follows the document: elements in tree order, attributes in
    source order within an element. The root's own attributes are included.

    Args:
        root (Tag): Scan boundary.
        names (AbstractSet[str]): Candidate attribute names.

    Yields:
        AttributeNode: (attribute name, raw value, owning element tag name).
    """
    for element in iter_elements(root):
        for name, value in element.attrs.items():
            if name in names:
                yield AttributeNode(name, _attribute_text(value), element.name)
