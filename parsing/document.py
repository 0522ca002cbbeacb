"""Parse HTML into a BeautifulSoup tree and read element attributes.

The tree itself belongs to BeautifulSoup: this module only decides which
parser backend to use and how a node's attributes are exposed to the
search helpers as an ordered sequence of ``(key, value)`` pairs.
"""

from __future__ import annotations

import os
from typing import Iterator

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement

DEFAULT_FEATURES = "html.parser"


def _collect_duplicate(attrs: dict, key: str, value: str) -> None:
    """Keep every occurrence of a repeated attribute instead of the last one."""
    existing = attrs[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        attrs[key] = [existing, value]


def _split_list_values(soup: BeautifulSoup) -> None:
    """Re-split collected duplicates of multi-valued attributes like ``class``.

    BS4 only splits string values on whitespace, so a collected list such
    as ``["x y", "z"]`` is flattened here to ``["x", "y", "z"]``.
    """
    multi_valued = soup.builder.cdata_list_attributes or {}
    universal = multi_valued.get("*", ())
    for tag in soup.find_all(True):
        for key, value in tag.attrs.items():
            if not isinstance(value, list):
                continue
            if key in universal or key in multi_valued.get(tag.name, ()):
                value[:] = [token for item in value for token in item.split()]


def parse_html(
    markup: str,
    features: str | None = None,
    *,
    keep_duplicate_attributes: bool = True,
) -> BeautifulSoup:
    """Parse *markup* into a ``BeautifulSoup`` document.

    Args:
        markup: Raw HTML (a full page or a fragment).
        features: BeautifulSoup parser backend.  Defaults to the
            ``HTMLUTIL_PARSER`` environment variable, else ``html.parser``.
        keep_duplicate_attributes: With the ``html.parser`` backend, store
            repeated attributes as a list of values so that each
            occurrence can be matched and removed on its own.  Other
            backends resolve duplicates themselves.  Rendering joins a
            collected list with spaces, so an untouched
            ``<p id="a" id="b">`` renders as ``<p id="a b">``; pass
            ``False`` to get BS4's last-one-wins behaviour instead.

    Returns:
        The parsed document.  Its ``[document]`` root never matches a
        search; its element descendants do.
    """
    if features is None:
        features = os.getenv("HTMLUTIL_PARSER", DEFAULT_FEATURES)

    if keep_duplicate_attributes and features == "html.parser":
        soup = BeautifulSoup(
            markup, features, on_duplicate_attribute=_collect_duplicate
        )
        _split_list_values(soup)
        return soup
    return BeautifulSoup(markup, features)


def is_element(node: PageElement | None) -> bool:
    """True for element nodes; False for text, comments and the document."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def iter_attribute_pairs(node: Tag) -> Iterator[tuple[str, str]]:
    """Yield a tag's attributes as ordered ``(key, value)`` pairs.

    BS4 stores multi-valued attributes like ``class`` (and duplicates
    collected by ``parse_html``) as a list; each list item is yielded as
    its own pair.  Valueless attributes yield an empty string.
    """
    for key, value in node.attrs.items():
        if isinstance(value, (list, tuple)):
            for item in value:
                yield key, str(item)
        elif value is None:
            yield key, ""
        else:
            yield key, str(value)
