"""Jenkins account administration client.

Structure:
- utils/requester.py: HTTP transport (requests session, auth, CSRF crumb)
- utils/client.py: create/delete/get user operations
- utils/users.py: User, UserRecord and the pollable Users resource
- mcp.py: FastMCP tool definitions + HTTP runner
"""

from .config import JenkinsAccountsConfig
from .utils.client import JenkinsClient
from .utils.errors import JenkinsError, UserError
from .utils.requester import JenkinsAuthConfig, JenkinsRequester
from .utils.users import User, UserRecord, Users

__all__ = [
    "JenkinsAccountsConfig",
    "JenkinsAuthConfig",
    "JenkinsClient",
    "JenkinsError",
    "JenkinsRequester",
    "User",
    "UserError",
    "UserRecord",
    "Users",
]
