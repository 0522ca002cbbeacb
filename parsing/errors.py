"""Exception types raised by the node search, pruning and render helpers."""


class HtmlUtilError(Exception):
    """Base class for all errors raised by this package."""


class NodeNotFoundError(HtmlUtilError, LookupError):
    """No node matched the search criteria.

    Only raised by callers that explicitly ask for it (see
    ``parsing.search.require_first_node``).  Plain searches return an
    empty list instead.
    """


class SerializationError(HtmlUtilError):
    """The renderer could not turn a node back into markup."""
