"""
Exceptions raised by the search core.
"""


class SearchError(Exception):
    """Base class for failures while fetching search results."""
    pass


class ResponseDecodeError(SearchError):
    """Raised when the search endpoint returns a body we cannot decode."""
    pass


class UnknownActionError(TypeError):
    """Raised when the reducer receives an action it has no case for."""

    def __init__(self, action: object):
        self.action = action
        super().__init__(f"Unhandled action: {action!r}")
