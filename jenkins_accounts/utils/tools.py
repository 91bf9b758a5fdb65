from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional

import requests

from .client import JenkinsClient
from .errors import UserError
from .users import User


def _user_body(user: User) -> Dict[str, Any]:
    return {
        "username": user.username,
        "full_name": user.full_name,
        "email": user.email,
        "raw": asdict(user.raw) if user.raw is not None else None,
    }


def _user_error(exc: UserError) -> Dict[str, Any]:
    return {
        "ok": False,
        "status": exc.status_code,
        "operation": exc.operation,
        "error": str(exc),
    }


def _transport_error(exc: requests.RequestException) -> Dict[str, Any]:
    return {"ok": False, "status": None, "error": str(exc)}


class AccountTools:
    """Tool-style wrappers around `JenkinsClient`.

    Each method returns a JSON-friendly envelope instead of raising, so the
    results can be handed straight to tool callers.
    """

    def __init__(self, client: JenkinsClient) -> None:
        self.client = client

    def create_user(self, username: str, password: str, full_name: str, email: str) -> Dict[str, Any]:
        """Create a Jenkins user account."""

        try:
            user = self.client.create_user(username, password, full_name, email)
        except UserError as exc:
            return _user_error(exc)
        except requests.RequestException as exc:
            return _transport_error(exc)
        return {"ok": True, "status": 200, "user": _user_body(user)}

    def delete_user(self, username: str) -> Dict[str, Any]:
        """Delete a Jenkins user account."""

        try:
            self.client.delete_user(username)
        except UserError as exc:
            return _user_error(exc)
        except requests.RequestException as exc:
            return _transport_error(exc)
        return {"ok": True, "status": 200, "username": username}

    def get_user(self, username: str) -> Dict[str, Any]:
        """Return a Jenkins user's id and full name."""

        try:
            user = self.client.get_user(username)
        except UserError as exc:
            return _user_error(exc)
        except requests.JSONDecodeError as exc:
            return {"ok": False, "status": 200, "error": f"Invalid JSON from Jenkins: {exc}"}
        except requests.RequestException as exc:
            return _transport_error(exc)
        except ValueError as exc:
            return {"ok": False, "status": 200, "error": f"Unexpected user payload from Jenkins: {exc}"}
        return {"ok": True, "status": 200, "user": _user_body(user)}

    def poll(self, path: str) -> Dict[str, Any]:
        """Fetch a JSON endpoint and report its HTTP status without judging it."""

        resource = self.client.users(path, decoder=_identity)
        try:
            status = resource.poll()
        except requests.JSONDecodeError as exc:
            return {"ok": False, "status": resource.status_code, "error": f"Invalid JSON from Jenkins: {exc}"}
        except requests.RequestException as exc:
            return {"ok": False, "status": resource.status_code, "error": str(exc)}
        return {"ok": True, "status": status, "url": self.client.requester.build_url(path), "body": resource.raw}


def _identity(body: Any) -> Any:
    return body
