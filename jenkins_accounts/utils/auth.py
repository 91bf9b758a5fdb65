from __future__ import annotations

import hmac
from typing import Any, Dict, Optional

from ..config import JenkinsAccountsConfig
from ..config_utils import env_optional_str

_UNAUTHORIZED: Dict[str, Any] = {
    "ok": False,
    "error": "Unauthorized Jenkins accounts client.",
    "hint": "Missing/invalid _client_token.",
}


def expected_client_token() -> str:
    # An empty env value counts as unset so the local-dev token still applies.
    return env_optional_str("JENKINS_ACCOUNTS_MCP_CLIENT_TOKEN") or JenkinsAccountsConfig.DEFAULT_DEV_CLIENT_TOKEN


def auth_or_error(client_token: Optional[str]) -> Optional[Dict[str, Any]]:
    """Return an error envelope unless `client_token` matches the server's token.

    Tool callers pass the token as the `_client_token` argument; the server
    reads it from JENKINS_ACCOUNTS_MCP_CLIENT_TOKEN.
    """

    if client_token and hmac.compare_digest(client_token.encode("utf-8"), expected_client_token().encode("utf-8")):
        return None
    return dict(_UNAUTHORIZED)
