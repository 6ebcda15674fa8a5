"""Exception hierarchy for the simulation engine."""


class SnowballError(Exception):
    """Base class for every error raised by the engine."""


class ValidationError(SnowballError, ValueError):
    """Rejected input: bad amount, month, day, age, id or phase."""


class InsufficientFundsError(ValidationError):
    pass


class InvalidPhaseError(ValidationError):
    pass


class UnsupportedMarketError(SnowballError, LookupError):
    """Market identifier is not in the registry."""


class MarketNotImplementedError(SnowballError, NotImplementedError):
    """Market is registered but its rules are not available yet."""


class PersistenceError(SnowballError, ValueError):
    """Saved game data could not be decoded."""
