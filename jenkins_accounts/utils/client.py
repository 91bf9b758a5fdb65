from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..config import JenkinsAccountsConfig
from .errors import UserError
from .requester import JenkinsAuthConfig, JenkinsRequester
from .users import User, UserRecord, Users

logger = logging.getLogger("jenkins_accounts.client")

CREATE_USER_PATH = "/securityRealm/createAccountByAdmin"


def _user_path(username: str, suffix: str) -> str:
    return f"/securityRealm/user/{quote(username, safe='')}/{suffix}"


class JenkinsClient:
    """Account administration against a single Jenkins instance.

    The client owns its requester. `User` and `Users` objects it hands out keep
    a plain reference back to it and never close it.
    """

    def __init__(self, config: JenkinsAuthConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.requester = JenkinsRequester(config, session=session)

    @classmethod
    def from_config(cls, cfg: JenkinsAccountsConfig, session: Optional[requests.Session] = None) -> "JenkinsClient":
        """Build a client from the env-first runtime config."""

        return cls(
            JenkinsAuthConfig(
                base_url=cfg.base_url,
                username=cfg.username,
                api_token=cfg.api_token,
                verify_ssl=cfg.verify_ssl,
                timeout=cfg.timeout,
                use_crumb=cfg.use_crumb,
            ),
            session=session,
        )

    def create_user(
        self,
        username: str,
        password: str,
        full_name: str,
        email: str,
        *,
        timeout: Optional[float] = None,
    ) -> User:
        """Create a Jenkins account and return it as supplied by the caller.

        The returned `User` echoes the arguments; it is not re-read from the
        server. Call `User.refresh()` for the server's view of the account.
        """

        user = User(jenkins=self, username=username, full_name=full_name, email=email)
        payload = {
            "username": username,
            "password1": password,
            "password2": password,
            "fullname": full_name,
            "email": email,
        }
        response = self.requester.post(CREATE_USER_PATH, data=payload, timeout=timeout)
        with response:
            status = response.status_code

        if status != 200:
            logger.warning("Creating Jenkins user %s failed with status %s", username, status)
            raise UserError("create", status, user=user)

        logger.info("Created Jenkins user %s", username)
        return user

    def delete_user(self, username: str, *, timeout: Optional[float] = None) -> None:
        response = self.requester.post(_user_path(username, "doDelete"), data={"Submit": "Yes"}, timeout=timeout)
        with response:
            status = response.status_code

        if status != 200:
            logger.warning("Deleting Jenkins user %s failed with status %s", username, status)
            raise UserError("delete", status)

        logger.info("Deleted Jenkins user %s", username)

    def get_user(self, username: str, *, timeout: Optional[float] = None) -> User:
        """Fetch a user's profile. Only `username` and `full_name` are filled; Jenkins does not expose email here."""

        with self.requester.get_json(_user_path(username, "api/json"), timeout=timeout) as response:
            if response.status_code != 200:
                raise UserError("retrieve", response.status_code)
            record = UserRecord.from_json(response.json())

        return User(jenkins=self, username=record.id, full_name=record.full_name, raw=record)

    def users(self, base: str, **fields: Any) -> Users:
        """Bind a pollable resource at `base` to this client."""

        return Users(jenkins=self, base=base, **fields)

    def close(self) -> None:
        self.requester.close()

    def __enter__(self) -> "JenkinsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
