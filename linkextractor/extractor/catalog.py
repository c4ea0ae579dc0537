# linkextractor/extractor/catalog.py
# Responsibility: The HTML5 table of URL-valued attributes and the elements they apply to.

from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


class UrlPolicy(str, Enum):
    """
    How an empty (post-strip) attribute value is treated.
    """
    ALLOW_EMPTY = "allow-empty"
    REQUIRE_NON_EMPTY = "require-non-empty"


# Source: https://www.w3.org/TR/html5/index.html#attributes-1
ALLOW_EMPTY_ATTRIBUTES: Dict[str, Tuple[str, ...]] = {
    "cite": ("blockquote", "del", "ins", "q"),
    "href": ("a", "area", "base"),
}

REQUIRE_NON_EMPTY_ATTRIBUTES: Dict[str, Tuple[str, ...]] = {
    "action": ("form",),
    "data": ("object",),
    "formaction": ("button", "input"),
    "href": ("link",),
    "manifest": ("html",),
    "poster": ("video",),
    "src": ("audio", "embed", "iframe", "img", "input", "script", "source", "track", "video"),
}


def build_catalog(
    tables: Iterable[Tuple[UrlPolicy, Mapping[str, Iterable[str]]]]
) -> Mapping[str, Mapping[str, UrlPolicy]]:
    """
    Merges per-policy tables into one read-only mapping: attribute -> {element: policy}.

    Args:
        tables: (policy, {attribute: elements}) pairs.

    Returns:
        Mapping[str, Mapping[str, UrlPolicy]]: Immutable lookup table.

    Raises:
        ValueError: If one (attribute, element) pair is given two policies.
    """
    merged: Dict[str, Dict[str, UrlPolicy]] = {}
    for policy, table in tables:
        for attribute, elements in table.items():
            rules = merged.setdefault(attribute, {})
            for element in elements:
                existing = rules.get(element)
                if existing is not None and existing is not policy:
                    raise ValueError(
                        f"Conflicting policies for {attribute!r} on <{element}>: "
                        f"{existing.value} vs {policy.value}"
                    )
                rules[element] = policy

    return MappingProxyType({
        attribute: MappingProxyType(rules) for attribute, rules in merged.items()
    })


URL_ATTRIBUTES = build_catalog([
    (UrlPolicy.ALLOW_EMPTY, ALLOW_EMPTY_ATTRIBUTES),
    (UrlPolicy.REQUIRE_NON_EMPTY, REQUIRE_NON_EMPTY_ATTRIBUTES),
])

# Single query filter for the tree scan
URL_ATTRIBUTE_NAMES: FrozenSet[str] = frozenset(URL_ATTRIBUTES)


def url_attribute_policy(attribute: str, element: str) -> Optional[UrlPolicy]:
    """
    Looks up the policy for an attribute on a given element.

    Returns:
        Optional[UrlPolicy]: The policy, or None if the pair is not URL-valued.
    """
    rules = URL_ATTRIBUTES.get(attribute)
    if rules is None:
        return None
    return rules.get(element)
