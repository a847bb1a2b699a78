"""Custom exceptions. Every layer raises a subclass of GameError, the API layer maps them onto status codes."""


class GameError(Exception):
    """Top-level exception of the checkers backend."""


class InvalidRequestError(GameError):
    """Request body could not be interpreted."""


class MoveNotImplementedError(GameError):
    """Moves are accepted by the API, but there is no rules engine behind them (yet)."""


class RepositoryError(GameError):
    """Persistence layer failed to read or write."""


class AggregationUnavailableError(GameError):
    """The win record could not be computed because the stored outcomes could not be read."""
