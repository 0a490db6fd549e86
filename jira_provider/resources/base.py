"""Shared plumbing for the Jira dynamic resource providers.

Status-code policy applied by every provider:
    - 404 on read   -> empty ID, the engine drops the resource from state
    - 404 on delete -> success, the resource is already gone
    - 400 on delete -> warning diagnostic, state is cleared
    - anything else -> exception, reported by the engine as a fatal diagnostic
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Optional

import pulumi
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    ConfigureRequest,
    DiffResult,
    ReadResult,
    ResourceProvider,
)
from pulumi.runtime.rpc import UNKNOWN

from jira_provider.config.settings import ProviderSettings, load_settings
from jira_provider.core import audit
from jira_provider.core.jira import AdminClient, JiraAPIError, JiraClient

logger = logging.getLogger(__name__)


def absent() -> ReadResult:
    """ReadResult telling the engine the resource no longer exists."""
    return ReadResult(id_="", outs={})


class JiraResourceProvider(ResourceProvider):
    """Base class for Jira providers.

    Subclasses list their input properties in ``immutable_fields``; any
    change to one of them forces a replacement since no resource supports
    update in place. ``validators`` maps input properties to callables that
    raise ``ValueError`` on bad input.
    """

    resource_label = "resource"
    immutable_fields: tuple[str, ...] = ()
    validators: dict[str, Callable[[str], Any]] = {}

    def __init__(self, settings: Optional[ProviderSettings] = None):
        super().__init__()
        self._explicit = settings
        self._stack_config = None
        self._jira: Optional[JiraClient] = None
        self._admin: Optional[AdminClient] = None
        self._site_url = ""

    # ─────────────────────────────────────────────────────────────────────
    # Configuration
    # ─────────────────────────────────────────────────────────────────────
    def configure(self, req: ConfigureRequest) -> None:
        self._stack_config = req.config

    def _build_clients(self) -> None:
        settings = load_settings(self._explicit, self._stack_config)
        self._site_url = settings.site_url
        self._jira = JiraClient(self._site_url, settings.email, settings.token)
        self._admin = AdminClient(settings.admin_token)
        logger.debug("Configured Jira clients for %s as %s", self._site_url, settings.email)

    @property
    def jira(self) -> JiraClient:
        if self._jira is None:
            self._build_clients()
        return self._jira

    @property
    def admin(self) -> AdminClient:
        if self._admin is None:
            self._build_clients()
        return self._admin

    # ─────────────────────────────────────────────────────────────────────
    # Lifecycle hooks shared by all resources
    # ─────────────────────────────────────────────────────────────────────
    def check(self, _olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        inputs = dict(news)
        failures = []
        for prop, validator in self.validators.items():
            value = news.get(prop)
            if value is None or value == "":
                failures.append(CheckFailure(prop, f"{prop} is required"))
                continue
            if value == UNKNOWN:
                # computed from another resource during preview
                continue
            try:
                inputs[prop] = validator(value)
            except ValueError as exc:
                failures.append(CheckFailure(prop, str(exc)))
        return CheckResult(inputs, failures)

    def diff(self, _id: str, olds: dict[str, Any], news: dict[str, Any]) -> DiffResult:
        replaces = [prop for prop in self.immutable_fields if olds.get(prop) != news.get(prop)]
        return DiffResult(
            changes=bool(replaces),
            replaces=replaces,
            delete_before_replace=True,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Status policy helpers
    # ─────────────────────────────────────────────────────────────────────
    def _delete_error_is_tolerated(self, exc: JiraAPIError, resource_id: str) -> bool:
        """Decide whether a failed delete still clears the resource from state."""
        if exc.is_not_found:
            logger.info("%s %s already absent", self.resource_label, resource_id)
            return True
        if exc.is_bad_request:
            pulumi.log.warn(
                f"Deleting {self.resource_label} {resource_id} returned 400, "
                f"removing it from state anyway: {exc.message}"
            )
            return True
        return False

    def _audit(self, event_type: audit.EventType, resource_id: str, success: bool = True, **details: Any) -> None:
        audit.safe_log_event(
            event_type,
            resource_id,
            domain=self._site_url,
            details=details,
            success=success,
        )
