from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

import requests

if TYPE_CHECKING:
    from .client import JenkinsClient

logger = logging.getLogger("jenkins_accounts.users")


@dataclass(frozen=True)
class UserRecord:
    """Decoded `/securityRealm/user/<name>/api/json` payload."""

    class_: str = ""
    absolute_url: str = ""
    description: Optional[str] = None
    full_name: str = ""
    id: str = ""

    @classmethod
    def from_json(cls, body: Dict[str, Any]) -> "UserRecord":
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object for a user record, got {type(body).__name__}")
        return cls(
            class_=body.get("_class") or "",
            absolute_url=body.get("absoluteUrl") or "",
            description=body.get("description"),
            full_name=body.get("fullName") or "",
            id=body.get("id") or "",
        )


@dataclass
class User:
    """A Jenkins account.

    `jenkins` points back at the client that created or fetched the account so
    the account can act on itself; the client's lifetime is managed by whoever
    built it.
    """

    jenkins: Optional["JenkinsClient"] = field(default=None, repr=False, compare=False)
    username: str = ""
    full_name: str = ""
    email: str = ""
    raw: Optional[UserRecord] = None

    def _client(self) -> "JenkinsClient":
        if self.jenkins is None:
            raise RuntimeError(f"User {self.username!r} is not bound to a Jenkins client.")
        return self.jenkins

    def delete(self) -> None:
        """Delete this account using the client's default timeout."""

        self._client().delete_user(self.username)

    def refresh(self) -> "User":
        """Fetch this account's server-side profile as a new `User`."""

        return self._client().get_user(self.username)


@dataclass
class Users:
    """A JSON resource polled for its status code.

    Each poll replaces `raw` with the latest decoded body. The status code is
    handed back untouched; deciding what counts as healthy is up to the caller.
    """

    jenkins: "JenkinsClient" = field(repr=False, compare=False)
    base: str
    username: str = ""
    full_name: str = ""
    email: str = ""
    id: str = ""
    raw: Optional[Any] = None
    status_code: int = 0
    decoder: Callable[[Any], Any] = field(default=UserRecord.from_json, repr=False, compare=False)

    def poll(self, *, timeout: Optional[float] = None) -> int:
        try:
            response = self.jenkins.requester.get_json(self.base, timeout=timeout)
        except requests.RequestException:
            self.status_code = 0
            raise

        with response:
            self.status_code = response.status_code
            content_type = response.headers.get("content-type", "")
            if "application/json" in content_type:
                self.raw = self.decoder(response.json())

        logger.debug("Polled %s: %s", self.base, self.status_code)
        return self.status_code
