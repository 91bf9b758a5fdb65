from __future__ import annotations

import inspect
import logging
from typing import Any, Dict, Optional

from fastmcp import FastMCP

from .config import JenkinsAccountsConfig
from .utils.auth import auth_or_error
from .utils.client import JenkinsClient
from .utils.tools import AccountTools

logger = logging.getLogger("jenkins_accounts.mcp")

mcp = FastMCP("jenkins-accounts-mcp")

_TOOLS: Optional[AccountTools] = None


def _tools_from_env() -> AccountTools:
    global _TOOLS
    if _TOOLS is not None:
        return _TOOLS

    cfg = JenkinsAccountsConfig.from_env()
    _TOOLS = AccountTools(JenkinsClient.from_config(cfg))
    return _TOOLS


@mcp.tool
def create_user(
    username: str,
    password: str,
    full_name: str,
    email: str,
    _client_token: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a Jenkins user account."""

    err = auth_or_error(_client_token)
    if err:
        return err
    return _tools_from_env().create_user(username, password, full_name, email)


@mcp.tool
def delete_user(username: str, _client_token: Optional[str] = None) -> Dict[str, Any]:
    """Delete a Jenkins user account."""

    err = auth_or_error(_client_token)
    if err:
        return err
    return _tools_from_env().delete_user(username)


@mcp.tool
def get_user(username: str, _client_token: Optional[str] = None) -> Dict[str, Any]:
    """Return a Jenkins user's id and full name."""

    err = auth_or_error(_client_token)
    if err:
        return err
    return _tools_from_env().get_user(username)


@mcp.tool
def poll(path: str, _client_token: Optional[str] = None) -> Dict[str, Any]:
    """Fetch a Jenkins JSON endpoint and return its HTTP status and body."""

    err = auth_or_error(_client_token)
    if err:
        return err
    return _tools_from_env().poll(path)


def run_server() -> None:
    """Run the account tool server over HTTP."""

    cfg = JenkinsAccountsConfig.from_env()

    # Only pass kwargs that this fastmcp version's `FastMCP.run()` accepts.
    sig = inspect.signature(mcp.run)
    kwargs: Dict[str, Any] = {"transport": "http"}
    if "host" in sig.parameters:
        kwargs["host"] = cfg.mcp_host
    if "port" in sig.parameters:
        kwargs["port"] = cfg.mcp_port

    logger.info("Starting Jenkins accounts tool server for %s", cfg.base_url)
    mcp.run(**kwargs)


if __name__ == "__main__":
    run_server()
