"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile

# Keep log files out of the working tree; the global logger is created on import.
os.environ.setdefault("RISKSCORES_LOG_DIR", tempfile.mkdtemp(prefix="riskscores-logs-"))

import pytest
import requests
from typing import Dict, Any, List


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip backoff delays."""
    monkeypatch.setattr("riskscores.retry.time.sleep", lambda _: None)


@pytest.fixture
def fake_http(monkeypatch, no_sleep):
    """
    Route requests.request through a queue of canned responses.

    Usage: calls = fake_http([FakeResponse(...), ...]); each entry is a
    FakeResponse or an exception to raise. Returns the list of recorded calls.
    """
    def install(responses: List[Any]):
        queue = list(responses)
        calls = []

        def fake_request(method, url, **kwargs):
            calls.append({"method": method, "url": url, **kwargs})
            item = queue.pop(0)
            if isinstance(item, Exception):
                raise item
            return item

        monkeypatch.setattr(requests, "request", fake_request)
        return calls

    return install


@pytest.fixture
def sample_strategy() -> Dict[str, Any]:
    """yDaemon strategy payload with risk details."""
    return {
        "address": "0x1111111111111111111111111111111111111111",
        "name": "StrategyCurveStETH",
        "displayName": "Curve stETH",
        "description": "Supplies ETH to Curve",
        "risk": {
            "riskScore": 3,
            "riskGroup": "Curve",
            "riskDetails": {
                "TVLImpact": 4,
                "auditScore": 3,
                "codeReviewScore": 4,
                "complexityScore": 5,
                "longevityImpact": 4,
                "protocolSafetyScore": 3,
                "teamKnowledgeScore": 4,
                "testingScore": 2,
            },
            "allocation": {
                "status": "Green",
                "currentTVL": "1234.5678",
                "availableTVL": 10,
                "currentAmount": "0.5",
                "availableAmount": "99.999",
            },
        },
    }


@pytest.fixture
def sample_vaults() -> List[Dict[str, Any]]:
    """yDaemon vault list with one strategy."""
    return [
        {
            "name": "stETH yVault",
            "address": "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa",
            "strategies": [{"address": "0x1111111111111111111111111111111111111111"}],
        }
    ]


@pytest.fixture
def sample_targets() -> List[Dict[str, Any]]:
    """Subgraph targets payload."""
    return [
        {
            "id": "1-0x1111",
            "address": "0x1111",
            "targetUrl": "https://yearn.fi/vaults/1/0x1111",
            "networkId": "1",
            "score": {"score": "3360820354", "scores": [3, 4, 5, 4, 3, 4, 2], "averageScore": "3571"},
            "tags": [
                {"value": "curve", "timestamp": "1", "removed": False},
                {"value": "old", "timestamp": "2", "removed": True},
                {"value": "lido", "timestamp": "3", "removed": False},
            ],
        }
    ]
