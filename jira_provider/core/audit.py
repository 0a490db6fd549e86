"""Audit logging utilities for provider lifecycle events.

Every create and delete appends a signed JSON line to
``$AUDIT_LOG_DIR/provider-events.jsonl``. ``AUDIT_LOG_DIR`` defaults to
``.runtime/audit`` relative to the working directory, so running ``pulumi up``
from a project creates ``.runtime/audit/`` inside it. Set ``AUDIT_LOG_DIR`` to
keep the trail elsewhere and ``AUDIT_LOG_SIGNING_KEY`` to sign entries.
Verify a trail with ``python -m jira_provider.core.audit``.
"""

from __future__ import annotations
import datetime
import hashlib
import hmac
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Literal

logger = logging.getLogger(__name__)

AUDIT_LOG_DIR = Path(os.environ.get("AUDIT_LOG_DIR", ".runtime/audit"))
AUDIT_LOG_FILE = AUDIT_LOG_DIR / "provider-events.jsonl"

EventType = Literal[
    "user_create", "user_disable",
    "group_create", "group_delete",
    "membership_add", "membership_remove",
]


def _get_signing_key() -> bytes:
    """Get the audit signing key from the environment (read on every call)."""
    return os.environ.get("AUDIT_LOG_SIGNING_KEY", "").strip().encode("utf-8")


def _ensure_audit_dir() -> None:
    """Create audit directory with restricted permissions."""
    AUDIT_LOG_DIR.mkdir(parents=True, exist_ok=True)
    AUDIT_LOG_DIR.chmod(0o700)


def _sign_event(event: dict[str, Any]) -> str:
    """Generate HMAC-SHA256 signature for audit event."""
    signing_key = _get_signing_key()
    if not signing_key:
        return ""
    # Canonical JSON representation for signing
    canonical = json.dumps(event, sort_keys=True, separators=(",", ":"))
    return hmac.new(signing_key, canonical.encode("utf-8"), hashlib.sha256).hexdigest()


def log_event(
    event_type: EventType,
    resource_id: str,
    *,
    domain: str = "",
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    """Append a lifecycle event to the audit trail with timestamp and signature.

    Args:
        event_type: Type of lifecycle operation
        resource_id: ID of the affected resource (account ID, group name, membership ID)
        domain: Jira site the operation ran against
        details: Additional context (email, status code, error...)
        success: Whether the operation succeeded
    """
    _ensure_audit_dir()

    event = {
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "event_type": event_type,
        "domain": domain,
        "resource_id": resource_id,
        "success": success,
        "details": details or {},
    }

    signature = _sign_event(event)
    if signature:
        event["signature"] = signature

    # One JSON object per line
    with AUDIT_LOG_FILE.open("a", encoding="utf-8") as f:
        f.write(json.dumps(event, ensure_ascii=False) + "\n")

    AUDIT_LOG_FILE.chmod(0o600)


def safe_log_event(
    event_type: EventType,
    resource_id: str,
    *,
    domain: str = "",
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> bool:
    """Log an event without ever raising.

    Audit failures must not fail the resource operation that triggered them;
    they are reported through the module logger instead.

    Returns:
        True if event was logged successfully, False if logging failed
    """
    try:
        log_event(
            event_type,
            resource_id,
            domain=domain,
            details=details,
            success=success,
        )
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.warning("Failed to log %s event for %s: %s", event_type, resource_id, e)
        return False


def verify_audit_log() -> tuple[int, int]:
    """Verify all signatures in the audit log.

    Returns:
        Tuple of (total_events, valid_signatures)
    """
    if not AUDIT_LOG_FILE.exists():
        return 0, 0

    total = 0
    valid = 0

    with AUDIT_LOG_FILE.open("r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            total += 1
            try:
                event = json.loads(line)
            except json.JSONDecodeError:
                continue
            stored_sig = event.pop("signature", "")
            if not stored_sig:
                continue
            computed_sig = _sign_event(event)
            if hmac.compare_digest(stored_sig, computed_sig):
                valid += 1

    return total, valid


if __name__ == "__main__":
    total, valid = verify_audit_log()
    print(f"Audit log: {valid}/{total} events with valid signatures")
    sys.exit(0 if total == valid else 1)
