"""Input validation helpers for resource properties."""
from __future__ import annotations

from jira_provider.core.membership import SEPARATOR

GROUP_NAME_MAX_LENGTH = 255


def validate_email(email: str) -> str:
    """Validate email address.

    Args:
        email: Email address to validate

    Returns:
        Trimmed email address

    Raises:
        ValueError: If email is invalid
    """
    email = (email or "").strip()
    if not email or "@" not in email:
        raise ValueError("Invalid email format")

    local, domain = email.rsplit("@", 1)
    if not local or not domain or "." not in domain:
        raise ValueError("Invalid email format")
    if len(email) > 254:
        raise ValueError("Email exceeds maximum length")

    return email


def validate_group_name(name: str) -> str:
    """Validate a Jira group name.

    Raises:
        ValueError: If name is empty or too long
    """
    if not name or not name.strip():
        raise ValueError("Group name is required")
    if len(name) > GROUP_NAME_MAX_LENGTH:
        raise ValueError(f"Group name exceeds {GROUP_NAME_MAX_LENGTH} characters")
    return name


def validate_membership_group_name(name: str) -> str:
    """Validate a group name used inside a membership ID.

    The name is the first half of ``"<group_name>:<account_id>"`` and must not
    contain the separator, otherwise the ID cannot be parsed back.
    """
    name = validate_group_name(name)
    if SEPARATOR in name:
        raise ValueError(f"Group name must not contain '{SEPARATOR}' when used in a membership")
    return name


def validate_account_id(account_id: str) -> str:
    if not account_id or not account_id.strip():
        raise ValueError("Account id is required")
    return account_id
