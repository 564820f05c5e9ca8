"""acctmgr — local account manager: login, registration and profile editing."""

__version__ = "0.1.0"
