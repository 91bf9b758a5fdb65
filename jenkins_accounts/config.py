from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jenkins_accounts.config_utils import env_bool, env_float, env_int, env_optional_str, env_str


@dataclass(frozen=True)
class JenkinsAccountsConfig:
    """Runtime configuration for the Jenkins account client and its tool server.

    Reads from environment variables first; falls back to local-dev defaults.

    Env vars:
    - JENKINS_BASE_URL
    - JENKINS_USERNAME
    - JENKINS_API_TOKEN
    - JENKINS_VERIFY_SSL
    - JENKINS_TIMEOUT: seconds, applied to every request
    - JENKINS_USE_CRUMB: fetch a CSRF crumb before POST requests

    Tool server:
    - JENKINS_ACCOUNTS_MCP_CLIENT_TOKEN
    - JENKINS_ACCOUNTS_MCP_HOST
    - JENKINS_ACCOUNTS_MCP_PORT
    """

    base_url: str
    username: Optional[str]
    api_token: Optional[str]
    verify_ssl: bool
    timeout: float
    use_crumb: bool
    mcp_client_token: str
    mcp_host: str
    mcp_port: int

    DEFAULT_BASE_URL: str = "http://localhost:8080"
    DEFAULT_VERIFY_SSL: bool = True
    DEFAULT_TIMEOUT: float = 15.0
    DEFAULT_USE_CRUMB: bool = True
    DEFAULT_DEV_CLIENT_TOKEN: str = "dev-jenkins-accounts-token"
    DEFAULT_MCP_HOST: str = "0.0.0.0"
    DEFAULT_MCP_PORT: int = 8000

    @classmethod
    def from_env(cls) -> "JenkinsAccountsConfig":
        return cls(
            base_url=env_str("JENKINS_BASE_URL", cls.DEFAULT_BASE_URL),
            username=env_optional_str("JENKINS_USERNAME"),
            api_token=env_optional_str("JENKINS_API_TOKEN"),
            verify_ssl=env_bool("JENKINS_VERIFY_SSL", cls.DEFAULT_VERIFY_SSL),
            timeout=env_float("JENKINS_TIMEOUT", cls.DEFAULT_TIMEOUT),
            use_crumb=env_bool("JENKINS_USE_CRUMB", cls.DEFAULT_USE_CRUMB),
            mcp_client_token=env_optional_str("JENKINS_ACCOUNTS_MCP_CLIENT_TOKEN") or cls.DEFAULT_DEV_CLIENT_TOKEN,
            mcp_host=env_str("JENKINS_ACCOUNTS_MCP_HOST", cls.DEFAULT_MCP_HOST),
            mcp_port=env_int("JENKINS_ACCOUNTS_MCP_PORT", cls.DEFAULT_MCP_PORT),
        )

