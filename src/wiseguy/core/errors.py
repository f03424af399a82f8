"""Core interaction errors."""


class WiseGuyError(Exception):
    """Base class for all Wise Guy errors."""

    pass


class ConfigError(WiseGuyError):
    """Raised when configuration is invalid."""


class IntentError(WiseGuyError):
    """Raised when an intent name is not part of the dialog."""

    pass


class StateError(WiseGuyError):
    """Raised when session state breaks the stage/joke invariant."""

    pass


class RequestError(WiseGuyError):
    """Raised when a platform request envelope cannot be dispatched."""

    pass


class ApplicationIdError(RequestError):
    """Raised when the request targets a different application id."""

    pass
