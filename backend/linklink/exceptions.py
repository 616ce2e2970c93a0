"""Exception hierarchy for the link-link engine."""


class LinkEngineError(Exception):
    """Base exception for engine failures."""


class InvalidLayoutError(LinkEngineError):
    """Raised when a level configuration leaves no playable slots."""


class InvalidGridError(LinkEngineError):
    """Raised when grid data cannot be parsed or breaks the grid shape."""


class InvalidMoveError(LinkEngineError):
    """Raised when a selection or pair match is not legal on the board."""


class DeadlockError(LinkEngineError):
    """Raised when no shuffle attempt produced a board with a legal move."""
