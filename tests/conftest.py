import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from newrelic_scim import Client  # noqa: E402
from newrelic_scim.config.settings import reset_settings  # noqa: E402

TOKEN = "test-token"


class FakeSCIMServer:
    """Records every request and answers with a canned response."""

    def __init__(self, status_code: int = 200, payload: Any = None, content: Optional[bytes] = None):
        self.status_code = status_code
        self.content = content if content is not None else json.dumps(payload or {}).encode()
        self.requests: List[httpx.Request] = []
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def scim_server():
    return FakeSCIMServer()


@pytest.fixture
def client(scim_server):
    http_client = httpx.Client(transport=httpx.MockTransport(scim_server))
    with Client(TOKEN, http_client=http_client) as scim_client:
        yield scim_client


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("SCIM_API_TOKEN", "SCIM_BASE_URL", "SCIM_TIMEOUT", "SCIM_TRACE_CONSOLE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
