"""
Cache Keys
==========

Convention:
    cache:{module.qualname}:{arg_hash}   cached value
    cache:tag:{tag}                      set of value keys carrying the tag

Examples:
    cache:services.dashboard.services.queries.get_framework:a1b2c3d4e5f6a7b8
    cache:tag:framework-cache
"""

import hashlib
import json
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel


def build_cache_key(func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """
    Build a deterministic Redis key from function identity and arguments.

    Every argument takes part in the key, so calls that differ only in
    organization_id never share an entry.
    """
    key_data = json.dumps(
        {"a": _normalize(args), "k": _normalize(kwargs)},
        sort_keys=True,
        separators=(",", ":"),
    )
    arg_hash = hashlib.sha256(key_data.encode()).hexdigest()[:16]
    return f"cache:{func.__module__}.{func.__qualname__}:{arg_hash}"


def tag_key(tag: str) -> str:
    """Return the Redis key of the set indexing all entries for a tag."""
    return f"cache:tag:{tag}"


def _normalize(obj: Any) -> Any:
    """Normalize arguments for deterministic hashing."""
    if isinstance(obj, (str, int, float, bool, type(None))):
        return obj
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, dict):
        return {str(k): _normalize(v) for k, v in sorted(obj.items())}
    if isinstance(obj, (list, tuple)):
        return [_normalize(item) for item in obj]
    return str(obj)
