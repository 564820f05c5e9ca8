"""acctmgr custom exception hierarchy.

All exceptions inherit from AcctMgrError.
Form validation failures are NOT exceptions: they travel as ActionResult.
"""


class AcctMgrError(Exception):
    """Base exception for all acctmgr errors."""


class ConfigError(AcctMgrError):
    """Configuration file load/validation error."""


class StorageError(AcctMgrError):
    """Key-value backend write failure (disk full, permission denied, etc.)."""


class CommandError(AcctMgrError):
    """Malformed interactive command line."""
