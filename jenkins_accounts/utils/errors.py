from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .users import User


class JenkinsError(Exception):
    """General exception type for Jenkins account API failures."""


class UserError(JenkinsError):
    """Jenkins answered a user operation with a non-success status.

    `operation` is one of "create", "delete" or "retrieve". For "create" the
    caller-supplied account is kept on `user` so it is not lost with the error.
    """

    _VERBS = {
        "create": "creating",
        "delete": "deleting",
        "retrieve": "retrieving",
    }

    def __init__(self, operation: str, status_code: int, user: Optional["User"] = None) -> None:
        self.operation = operation
        self.status_code = status_code
        self.user = user
        verb = self._VERBS.get(operation, operation)
        super().__init__(f"error {verb} user. Status is {status_code}")
