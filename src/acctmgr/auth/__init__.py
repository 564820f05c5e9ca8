"""Authentication: validation rules and the session state machine."""

from acctmgr.auth.session import SessionMachine

__all__ = ["SessionMachine"]
