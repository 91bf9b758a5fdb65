from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import requests

logger = logging.getLogger("jenkins_accounts.requester")

CRUMB_PATH = "/crumbIssuer/api/json"

# Crumb cache states: None = not fetched yet, False = server issues no crumbs.
_Crumb = Union[None, bool, Dict[str, str]]


@dataclass
class JenkinsAuthConfig:
    base_url: str
    username: Optional[str] = None
    api_token: Optional[str] = None
    verify_ssl: bool = True
    timeout: float = 15.0
    use_crumb: bool = True


class JenkinsRequester:
    """Thin HTTP transport for the Jenkins management API.

    Every call builds its own request and returns the raw `requests.Response`;
    status handling and decoding belong to the caller. The underlying session
    is owned by the requester and closed with it.
    """

    def __init__(self, config: JenkinsAuthConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self._session = session if session is not None else requests.Session()
        self._crumb: _Crumb = None

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    def build_url(self, path: str) -> str:
        if path.startswith("http"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _auth(self) -> Optional[tuple]:
        if self.config.username and self.config.api_token:
            return (self.config.username, self.config.api_token)
        return None

    def _request(
        self,
        method: str,
        path: str,
        *,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> requests.Response:
        url = self.build_url(path)
        logger.debug("%s %s", method, url)
        return self._session.request(
            method,
            url,
            auth=self._auth(),
            verify=self.config.verify_ssl,
            timeout=timeout if timeout is not None else self.config.timeout,
            **kwargs,
        )

    def crumb_header(self, timeout: Optional[float] = None) -> Dict[str, str]:
        """Return the CSRF crumb header for POST requests, fetching it once."""

        if not self.config.use_crumb:
            return {}

        if self._crumb is None:
            response = self._request("GET", CRUMB_PATH, timeout=timeout, headers={"Accept": "application/json"})
            with response:
                if response.status_code == 404:
                    logger.debug("Jenkins at %s issues no crumbs", self.base_url)
                    self._crumb = False
                elif response.status_code != 200:
                    # Not cached; the POST goes out bare and its own status decides.
                    logger.warning("Crumb request to %s failed with status %s", self.base_url, response.status_code)
                    return {}
                else:
                    self._crumb = response.json()

        if not self._crumb:
            return {}
        return {self._crumb["crumbRequestField"]: self._crumb["crumb"]}

    def post(
        self,
        path: str,
        data: Union[None, str, bytes, Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        merged: Dict[str, str] = dict(self.crumb_header(timeout=timeout))
        if headers:
            merged.update(headers)
        return self._request("POST", path, timeout=timeout, data=data, headers=merged, params=params)

    def get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """GET a JSON resource; decode with `response.json()`."""

        return self._request("GET", path, timeout=timeout, params=params, headers={"Accept": "application/json"})

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "JenkinsRequester":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
