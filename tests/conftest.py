"""Fixtures communes : faux backend HTTP pour ApiClient."""
import json
from unittest.mock import MagicMock

import pytest
import requests

from gohac_admin.client.api import ApiClient


def make_response(status: int = 200, body=None, reason: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason or ("OK" if status < 400 else "Error")
    resp.encoding = "utf-8"
    resp._content = json.dumps(body).encode("utf-8") if body is not None else b""
    resp.headers["Content-Type"] = "application/json"
    return resp


@pytest.fixture
def http():
    """Session requests dont request() est un MagicMock (retourne 200 {} par défaut)."""
    session = requests.Session()
    session.request = MagicMock(return_value=make_response(200, {}))
    return session


@pytest.fixture
def api(http):
    return ApiClient(base_url="http://cms.test/api", session=http, timeout=5)
