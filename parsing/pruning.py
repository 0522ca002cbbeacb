"""Remove matching nodes or attribute values from a BeautifulSoup tree.

Both operations share the same two-step shape:
    1. ``find_matching()`` builds a worklist with the given criteria.
       The tree is not touched while searching.
    2. The worklist is mutated: nodes are detached, or attribute values
       are filtered out.

Nodes are detached with ``extract()``, so each subtree leaves the
document intact with its root and callers holding a reference to a
removed node can still use it.
"""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import Tag
from bs4.element import PageElement

from models.criteria import MatchCriteria
from parsing.search import find_matching

logger = logging.getLogger("htmlutil")


def remove_nodes(
    root: PageElement,
    tag: str = "",
    attr: str = "",
    attr_value: str = "",
    limit: Optional[int] = None,
) -> None:
    """Detach up to *limit* matching nodes (and their subtrees) from the tree.

    Matches are detached in reverse document order, so a matched
    descendant always leaves before a matched ancestor.  A matched node
    with no parent (typically *root* itself) is left in place.

    This function **mutates** the tree in place.  Finding nothing is not
    an error.
    """
    criteria = MatchCriteria(
        tag=tag, attr=attr, attr_value=attr_value, limit=limit
    )
    nodes = find_matching(root, criteria)

    removed = 0
    for node in reversed(nodes):
        if node.parent is None:
            continue
        node.extract()
        removed += 1

    logger.debug(
        "removed %d node(s)",
        removed,
        extra={"tag": tag, "attr": attr, "removed": removed},
    )


def remove_all_nodes(
    root: PageElement, tag: str = "", attr: str = "", attr_value: str = ""
) -> None:
    """Detach every matching node."""
    remove_nodes(root, tag, attr, attr_value, limit=None)


def remove_first_node(
    root: PageElement, tag: str = "", attr: str = "", attr_value: str = ""
) -> None:
    """Detach the first matching node in document order."""
    remove_nodes(root, tag, attr, attr_value, limit=1)


def _strip_attribute_value(node: Tag, attr: str, attr_value: str) -> int:
    """Drop every ``attr=attr_value`` occurrence from *node*.

    Returns the number of values removed.
    """
    value = node.attrs.get(attr)
    if value is None:
        return 0

    if not isinstance(value, (list, tuple)):
        if value != attr_value:
            return 0
        del node[attr]
        return 1

    # Build a new list rather than deleting while iterating.
    kept = [item for item in value if item != attr_value]
    removed = len(value) - len(kept)
    if not removed:
        return 0
    if not kept:
        del node[attr]
    elif isinstance(value, list):
        # Keep the builder's list type (e.g. AttributeValueList).
        value[:] = kept
    else:
        node[attr] = kept
    return removed


def remove_attributes(
    root: PageElement,
    tag: str = "",
    attr: str = "",
    attr_value: str = "",
    limit: Optional[int] = None,
) -> None:
    """Remove ``attr=attr_value`` pairs from up to *limit* matching nodes.

    The nodes to edit are found with the same criteria.  On each of them
    every occurrence of the exact key/value pair is removed, including
    repeated occurrences and single items of multi-valued attributes such
    as ``class``.  An attribute left with no value is deleted.

    This function **mutates** the tree in place.

    Raises:
        ValueError: If *attr* or *attr_value* is empty.  Unlike searching,
            removal only works on an exact key and value.
    """
    if not attr or not attr_value:
        raise ValueError(
            "remove_attributes requires both an attribute name and a value"
        )

    criteria = MatchCriteria(
        tag=tag, attr=attr, attr_value=attr_value, limit=limit
    )
    nodes = find_matching(root, criteria)

    removed = 0
    for node in nodes:
        removed += _strip_attribute_value(node, attr, attr_value)

    logger.debug(
        "removed %d attribute value(s) from %d node(s)",
        removed,
        len(nodes),
        extra={"tag": tag, "attr": attr, "removed": removed},
    )


def remove_all_attributes(
    root: PageElement, tag: str = "", attr: str = "", attr_value: str = ""
) -> None:
    """Remove the pair from every matching node."""
    remove_attributes(root, tag, attr, attr_value, limit=None)


def remove_first_attribute(
    root: PageElement, tag: str = "", attr: str = "", attr_value: str = ""
) -> None:
    """Remove the pair from the first matching node only."""
    remove_attributes(root, tag, attr, attr_value, limit=1)
