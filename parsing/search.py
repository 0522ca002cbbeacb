"""Depth-first node search over a BeautifulSoup tree.

Nodes are returned in document order (pre-order, children left to
right).  A node is collected at most once, however many of its
attribute pairs satisfy the filter, and the walk stops as soon as the
requested number of nodes has been found.

Zero matches is a normal outcome: every helper here returns an empty
list (or the caller's ``default``) except ``require_first_node``.
"""

from __future__ import annotations

from typing import Any, Optional

from bs4 import Tag
from bs4.element import PageElement

from models.criteria import MatchCriteria
from parsing.document import is_element, iter_attribute_pairs
from parsing.errors import NodeNotFoundError


def node_matches(node: PageElement, criteria: MatchCriteria) -> bool:
    """Check a single node against *criteria* (children are not visited)."""
    if not is_element(node):
        return False
    if criteria.tag and node.name != criteria.tag:
        return False
    # No attribute criteria: an attribute-less element must still match.
    if not criteria.has_attribute_filter:
        return True
    return any(
        criteria.accepts_pair(key, value)
        for key, value in iter_attribute_pairs(node)
    )


def find_matching(root: PageElement, criteria: MatchCriteria) -> list[Tag]:
    """Collect nodes under (and including) *root* that satisfy *criteria*.

    Uses an explicit stack instead of recursion so deeply nested
    documents do not hit the interpreter's recursion limit.
    """
    found: list[Tag] = []
    stack: list[PageElement] = [root]

    while stack and not criteria.is_satisfied(len(found)):
        node = stack.pop()
        if node_matches(node, criteria):
            found.append(node)
        if isinstance(node, Tag):
            # Reversed so the leftmost child is popped first.
            stack.extend(reversed(node.contents))

    return found


def find_nodes(
    root: PageElement,
    tag: str = "",
    attr: str = "",
    attr_value: str = "",
    limit: Optional[int] = None,
) -> list[Tag]:
    """Return up to *limit* nodes matching a tag and attribute filter.

    Args:
        root: Node to search from; it is itself a candidate.
        tag: Exact tag name (as normalized by the parser), or ``""`` for
            any element.
        attr: Attribute name, or ``""`` for any attribute.
        attr_value: Attribute value, or ``""`` for any value.
        limit: Maximum number of nodes; ``None`` or ``-1`` for all.

    Returns:
        Matching nodes in document order, possibly empty.

    Raises:
        pydantic.ValidationError: If *limit* is zero or negative
            (other than ``-1``).
    """
    criteria = MatchCriteria(
        tag=tag, attr=attr, attr_value=attr_value, limit=limit
    )
    return find_matching(root, criteria)


def find_all_nodes(
    root: PageElement, tag: str = "", attr: str = "", attr_value: str = ""
) -> list[Tag]:
    """Return every matching node."""
    return find_nodes(root, tag, attr, attr_value, limit=None)


def find_first_node(
    root: PageElement,
    tag: str = "",
    attr: str = "",
    attr_value: str = "",
    default: Any = None,
    *,
    placeholder: bool = False,
) -> Any:
    """Return the first matching node, or a stand-in when none matches.

    The stand-in is *default* (``None`` unless given).  With
    ``placeholder=True`` it is a new empty ``Tag(name="")`` instead, so
    callers can use node attributes without a ``None`` check.  A fresh
    tag is built on every call.
    """
    nodes = find_nodes(root, tag, attr, attr_value, limit=1)
    if nodes:
        return nodes[0]
    if placeholder:
        return Tag(name="")
    return default


def require_first_node(
    root: PageElement, tag: str = "", attr: str = "", attr_value: str = ""
) -> Tag:
    """Return the first matching node.

    Raises:
        NodeNotFoundError: If nothing matches.
    """
    nodes = find_nodes(root, tag, attr, attr_value, limit=1)
    if not nodes:
        raise NodeNotFoundError(
            f"no <{tag or '*'}> node with {attr or '*'}={attr_value or '*'!r}"
        )
    return nodes[0]
