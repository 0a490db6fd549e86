"""Pytest shared fixtures."""
import json
import pathlib
import sys
from unittest.mock import Mock

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from jira_provider.config.settings import FIELD_SOURCES, ProviderSettings
from jira_provider.core import audit


class StubResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code: int = 200, url: str = "http://stub"):
        self._payload = payload
        self.status_code = status_code
        self.url = url
        self.text = json.dumps(payload) if payload is not None else ""

    def json(self):
        return self._payload


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """Fail any unit test that would send a real HTTP request."""
    if request.node.get_closest_marker("integration"):
        return

    def _unexpected(method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests, "request", _unexpected)


@pytest.fixture(autouse=True)
def _clean_provider_env(monkeypatch):
    """Provider configuration must never leak in from the developer's shell."""
    for env_var, _, _ in FIELD_SOURCES.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def audit_log(monkeypatch, tmp_path):
    """Redirect the audit trail to an isolated directory."""
    audit_dir = tmp_path / "audit"
    audit_file = audit_dir / "provider-events.jsonl"
    monkeypatch.setattr(audit, "AUDIT_LOG_DIR", audit_dir)
    monkeypatch.setattr(audit, "AUDIT_LOG_FILE", audit_file)
    monkeypatch.setenv("AUDIT_LOG_SIGNING_KEY", "test-signing-key")
    return audit_file


@pytest.fixture
def http(monkeypatch):
    """Record outgoing requests and answer them from a queue of StubResponses.

    Usage:
        http.responses.append(StubResponse({"accountId": "abc"}, 201))
        ...
        method, url, kwargs = http.calls[0]
    """
    recorder = Mock()
    recorder.calls = []
    recorder.responses = []

    def _request(method, url, *args, **kwargs):
        recorder.calls.append((method, url, kwargs))
        resp = recorder.responses.pop(0)
        resp.url = url
        return resp

    monkeypatch.setattr(requests, "request", _request)
    return recorder


@pytest.fixture
def provider_settings():
    return ProviderSettings(
        domain="acme",
        email="bot@acme.io",
        token="jira-token",
        admin_token="admin-token",
    )


def read_audit_events(audit_file):
    if not audit_file.exists():
        return []
    return [json.loads(line) for line in audit_file.read_text().splitlines() if line.strip()]


@pytest.fixture
def stub_response():
    return StubResponse


@pytest.fixture
def audit_events(audit_log):
    """Callable returning the audit events written so far."""
    return lambda: read_audit_events(audit_log)
