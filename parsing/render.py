"""Render a node back to markup text with BS4's serializer."""

from __future__ import annotations

from bs4 import Tag
from bs4.element import NavigableString, PageElement

from parsing.errors import SerializationError


def node_to_string(
    node: PageElement, formatter: str = "minimal", *, pretty: bool = False
) -> str:
    """Convert *node* (element, text or whole document) to a string.

    Args:
        node: Any node of a parsed tree.
        formatter: BS4 output formatter name (``"minimal"``, ``"html"``,
            ``"html5"``, ``None``) or a ``Formatter`` instance.
        pretty: Indent the output with ``prettify()``.  Only applies to
            element and document nodes.

    List-valued attributes render space-joined, including single-valued
    attributes that ``parse_html`` collected from duplicates.

    Raises:
        SerializationError: If BS4 cannot serialize the node.  The
            original exception is chained as ``__cause__``.
    """
    try:
        if isinstance(node, Tag):
            if pretty:
                return node.prettify(formatter=formatter)
            return node.decode(formatter=formatter)
        if isinstance(node, NavigableString):
            return node.output_ready(formatter=formatter)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise SerializationError(
            f"cannot render {type(node).__name__}: {exc}"
        ) from exc

    raise SerializationError(f"cannot render {type(node).__name__}")
