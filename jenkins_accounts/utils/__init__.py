"""Jenkins account utilities.

- `requester`: HTTP transport
- `client`: account operations
- `users`: account value objects and the pollable resource
- `errors`: exception types
- `tools`: dict-returning wrappers for tool callers
- `auth`: client token check for tool callers
"""

__all__ = [
	"auth",
	"client",
	"errors",
	"requester",
	"tools",
	"users",
]
