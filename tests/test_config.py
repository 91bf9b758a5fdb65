from jenkins_accounts import JenkinsAccountsConfig, JenkinsClient


def test_defaults(monkeypatch):
    for name in (
        "JENKINS_BASE_URL",
        "JENKINS_USERNAME",
        "JENKINS_API_TOKEN",
        "JENKINS_VERIFY_SSL",
        "JENKINS_TIMEOUT",
        "JENKINS_USE_CRUMB",
        "JENKINS_ACCOUNTS_MCP_PORT",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = JenkinsAccountsConfig.from_env()

    assert cfg.base_url == "http://localhost:8080"
    assert cfg.username is None
    assert cfg.verify_ssl is True
    assert cfg.timeout == 15.0
    assert cfg.use_crumb is True
    assert cfg.mcp_port == 8000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("JENKINS_BASE_URL", "https://ci.example.com/")
    monkeypatch.setenv("JENKINS_USERNAME", "admin")
    monkeypatch.setenv("JENKINS_API_TOKEN", "  tok ")
    monkeypatch.setenv("JENKINS_VERIFY_SSL", "off")
    monkeypatch.setenv("JENKINS_TIMEOUT", "2.5")
    monkeypatch.setenv("JENKINS_USE_CRUMB", "no")
    monkeypatch.setenv("JENKINS_ACCOUNTS_MCP_PORT", "not-a-port")

    cfg = JenkinsAccountsConfig.from_env()

    assert cfg.api_token == "tok"
    assert cfg.verify_ssl is False
    assert cfg.timeout == 2.5
    assert cfg.use_crumb is False
    assert cfg.mcp_port == 8000

    client = JenkinsClient.from_config(cfg)
    assert client.requester.base_url == "https://ci.example.com"
    assert client.config.username == "admin"
    assert client.config.use_crumb is False
    client.close()


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("JENKINS_TIMEOUT", "0")

    assert JenkinsAccountsConfig.from_env().timeout == 15.0


def test_env_helpers(monkeypatch):
    from jenkins_accounts.config_utils import env_bool, env_int, env_optional_str, env_str

    monkeypatch.setenv("JA_FLAG", " Yes ")
    monkeypatch.setenv("JA_BAD_FLAG", "maybe")
    monkeypatch.setenv("JA_NUM", " 42 ")
    monkeypatch.setenv("JA_TEXT", "  padded  ")
    monkeypatch.setenv("JA_EMPTY", "")
    monkeypatch.delenv("JA_MISSING", raising=False)

    assert env_bool("JA_FLAG", False) is True
    assert env_bool("JA_BAD_FLAG", True) is True
    assert env_int("JA_NUM", 0) == 42
    assert env_int("JA_TEXT", 7) == 7
    assert env_str("JA_TEXT", "x") == "padded"
    assert env_str("JA_TEXT", "x", strip=False) == "  padded  "
    assert env_str("JA_MISSING", "x") == "x"
    assert env_optional_str("JA_EMPTY", "fallback") == "fallback"
    assert env_optional_str("JA_MISSING") is None
