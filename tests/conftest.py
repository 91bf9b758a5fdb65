import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from jenkins_accounts import JenkinsAuthConfig, JenkinsClient


def make_response(status: int, body: Any = None, *, url: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp._content_consumed = True
    if body is None:
        resp._content = b""
    elif isinstance(body, (dict, list)):
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json;charset=utf-8"
    else:
        resp._content = str(body).encode("utf-8")
        resp.headers["Content-Type"] = "text/html"
    return resp


class FakeSession:
    """Stub Jenkins: answers queued responses in order and records every request."""

    def __init__(self, *responses: Any) -> None:
        self.responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        answer = self.responses.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def close(self) -> None:
        self.closed = True


BASE_URL = "http://jenkins.example:8080"


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> JenkinsClient:
    config = JenkinsAuthConfig(base_url=BASE_URL + "/", username="admin", api_token="s3cret", use_crumb=False)
    return JenkinsClient(config, session=session)


@pytest.fixture
def default_client(session: FakeSession) -> JenkinsClient:
    """Client with the shipped defaults, crumb handling included."""

    return JenkinsClient(JenkinsAuthConfig(base_url=BASE_URL), session=session)
