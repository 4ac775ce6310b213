"""Custom exceptions. Every error raised on purpose by this package derives from GameError."""


class GameError(Exception):
    """Top-level exception: service and API layers can catch this one."""


class InvalidMoveError(GameError):
    """Attempt to place a disc where the sandwich rule does not hold."""


class InvalidCoordinateError(GameError):
    """Row or column outside of the board."""


class InvalidLayoutError(GameError):
    """Board layout string (or square notation) cannot be parsed."""


class GameStateError(GameError):
    """Action not allowed given the status of the game, or a stored game is inconsistent."""


class NotYourTurnError(GameError):
    """The other color is supposed to move."""


class RepositoryError(GameError):
    """Record could not be found / stored."""


class InvalidRequestError(GameError):
    """Raised by the request model validators."""
