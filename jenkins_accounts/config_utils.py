from __future__ import annotations

import os
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

_TRUE = frozenset({"1", "true", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "no", "n", "off"})


def _lookup(name: str, *, strip: bool = True) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return None
    return value.strip() if strip else value


def _parsed(name: str, default: T, parse: Callable[[str], T]) -> T:
    raw = _lookup(name)
    if raw is None:
        return default
    try:
        return parse(raw)
    except ValueError:
        return default


def env_str(name: str, default: str, *, strip: bool = True) -> str:
    value = _lookup(name, strip=strip)
    return default if value is None else value


def env_optional_str(name: str, default: Optional[str] = None, *, strip: bool = True) -> Optional[str]:
    return _lookup(name, strip=strip) or default


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(raw)


def env_bool(name: str, default: bool) -> bool:
    return _parsed(name, default, _parse_bool)


def env_int(name: str, default: int) -> int:
    return _parsed(name, default, int)


def env_float(name: str, default: float) -> float:
    value = _parsed(name, default, float)
    # Non-positive timeouts would make every request fail immediately.
    return value if value > 0 else default
