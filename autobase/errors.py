"""Exception and warning types raised while planning BASE table records."""

from typing import Optional


class AutobaseError(Exception):
    """Base class for every error raised by autobase."""


class ConfigurationError(AutobaseError):
    """Invalid configuration; fatal and reported before any measurement."""


class FontReadError(AutobaseError):
    """The font could not be opened or lacks a table the run needs."""


class MeasurementFailure(AutobaseError):
    """The shaping/measurement collaborator failed for one key."""

    def __init__(self, key, reason: str):
        super().__init__(f"{key}: measurement failed ({reason})")
        self.key = key
        self.reason = reason

    def __reduce__(self):
        # survives the trip back from measurement worker processes
        return (self.__class__, (self.key, self.reason))


class IncompleteOverrideError(AutobaseError):
    """A language record has neither a measurement nor a complete override."""

    def __init__(self, key, missing: str, cause: Optional[Exception] = None):
        super().__init__(
            f"{key}: no measured sample and no override for {missing}; record omitted"
        )
        self.key = key
        self.missing = missing
        self.cause = cause


class UnsupportedKeyWarning(UserWarning):
    """A configured split or override names a script/language the font never exercises."""

    def __init__(self, key, reason: str = "not exercised by the font"):
        super().__init__(f"{key}: {reason}; ignored")
        self.key = key
        self.reason = reason
