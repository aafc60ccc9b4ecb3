# =============================================================================
# core/decode.py  -  Typed Field Access for Untyped JSON
# =============================================================================
#
# Reddit's JSON is deeply nested and drifts over time.  Instead of casting
# field by field all over the formatters, every lookup goes through the small
# helpers below.  Each one either returns a value of the expected type or
# raises FormatError carrying the dotted path that failed, for example:
#
#     data.children[0].data.title
#
# so an error result tells the caller exactly what was missing.
# =============================================================================

import math
from typing import Any, Union

from core.errors import FormatError

PathPart = Union[str, int]


def join_path(base: str, part: PathPart) -> str:
    """Append one key or index to a dotted path string."""
    if isinstance(part, int):
        return f"{base}[{part}]"
    return f"{base}.{part}" if base else part


def dig(value: Any, *parts: PathPart, base: str = "", message: str | None = None) -> Any:
    """Walk `parts` through nested dicts (str keys) and lists (int indices).

    Args:
        value: The JSON value to start from.
        *parts: Keys and indices to follow, in order.
        base: Path of `value` itself, used as the prefix in error paths.
        message: Error message to raise instead of the default one.

    Returns:
        Whatever sits at the end of the path.

    Raises:
        FormatError: If any step is missing or has the wrong container type.
    """
    path = base
    current = value
    for part in parts:
        path = join_path(path, part)
        if isinstance(part, int):
            if not isinstance(current, list) or not -len(current) <= part < len(current):
                raise FormatError(message or f"missing field: {path}", path=path)
        elif not isinstance(current, dict) or part not in current:
            raise FormatError(message or f"missing field: {path}", path=path)
        current = current[part]
    return current


def require_mapping(value: Any, *parts: PathPart, base: str = "", message: str | None = None) -> dict[str, Any]:
    found = dig(value, *parts, base=base, message=message)
    if not isinstance(found, dict):
        path = _full_path(base, parts)
        raise FormatError(message or f"expected an object at {path}", path=path)
    return found


def require_list(value: Any, *parts: PathPart, base: str = "", message: str | None = None) -> list[Any]:
    found = dig(value, *parts, base=base, message=message)
    if not isinstance(found, list):
        path = _full_path(base, parts)
        raise FormatError(message or f"expected an array at {path}", path=path)
    return found


def require_str(data: dict[str, Any], key: str, base: str = "") -> str:
    found = dig(data, key, base=base)
    if not isinstance(found, str):
        path = join_path(base, key)
        raise FormatError(f"expected a string at {path}", path=path)
    return found


def require_number(data: dict[str, Any], key: str, base: str = "") -> float:
    """Read a JSON number.  Booleans are rejected even though bool is an int."""
    found = dig(data, key, base=base)
    if isinstance(found, bool) or not isinstance(found, (int, float)):
        path = join_path(base, key)
        raise FormatError(f"expected a number at {path}", path=path)
    try:
        value = float(found)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        path = join_path(base, key)
        raise FormatError(f"expected a finite number at {path}", path=path)
    return value


def require_int(data: dict[str, Any], key: str, base: str = "") -> int:
    """Read a JSON number and truncate it toward zero."""
    return int(require_number(data, key, base=base))


def optional_str(data: dict[str, Any], key: str) -> str | None:
    """Return a non-empty string field, or None when absent, empty or mistyped."""
    found = data.get(key)
    if isinstance(found, str) and found:
        return found
    return None


def _full_path(base: str, parts: tuple[PathPart, ...]) -> str:
    path = base
    for part in parts:
        path = join_path(path, part)
    return path or "<root>"
