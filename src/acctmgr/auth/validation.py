"""Form validation rules.

Pure predicates; inputs are trimmed before checking and never mutated.
The email rule is deliberately loose: any string with "@" and "." passes.
"""

from __future__ import annotations

from typing import Any

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 4

NAME_TOO_SHORT = "Name must be at least 2 characters."
INVALID_EMAIL = "Please enter a valid email."
PASSWORD_TOO_SHORT = "Password must be at least 4 characters."
PASSWORD_MISMATCH = "Passwords do not match."
DUPLICATE_EMAIL = "An account with this email already exists."
INVALID_CREDENTIALS = "Invalid email or password."
USER_NOT_FOUND = "User not found."


def safe_trim(value: Any) -> str:
    """None -> "", anything else -> its stripped string form."""
    if value is None:
        return ""
    return str(value).strip()


def normalize_email(value: Any) -> str:
    return safe_trim(value).lower()


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and "@" in value and "." in value


def is_valid_name(value: Any) -> bool:
    return len(safe_trim(value)) >= MIN_NAME_LENGTH


def is_valid_password(value: Any) -> bool:
    return len(safe_trim(value)) >= MIN_PASSWORD_LENGTH


def passwords_match(password: Any, confirm: Any) -> bool:
    return safe_trim(password) == safe_trim(confirm)
