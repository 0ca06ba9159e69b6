"""Fatal errors raised by the naming pipeline.

Every error aborts the run. `cli.main()` is the only place that turns them
into a logged `ERROR:` line and a non-zero exit status.
"""

from __future__ import annotations


class NamingError(Exception):
    """Base class for all fatal naming errors."""


class UsageError(NamingError):
    """Bad or help-only command line; the caller prints usage and exits 1."""


class NotAdministratorError(NamingError, PermissionError):
    pass


class DataUnavailableError(NamingError):
    pass


class InvalidCharacterError(NamingError, ValueError):
    pass


class NameTooLongError(NamingError, ValueError):
    pass


class ApplyError(NamingError):
    pass


class VerificationMismatchError(NamingError):
    pass
