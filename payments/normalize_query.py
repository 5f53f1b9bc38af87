"""
Query normalization.

Framework directives arrive as ``$``-prefixed keys (``$limit``); Stripe
expects the bare name. Lists and nested mappings are rewritten recursively.
"""

from collections.abc import Mapping
from typing import Any

DIRECTIVE_PREFIX = "$"


def clean_query(query: Any) -> Any:
    """Strip the directive prefix from every mapping key, recursively."""
    if isinstance(query, list):
        return [clean_query(item) for item in query]
    if isinstance(query, Mapping):
        result = {}
        for key, value in query.items():
            if isinstance(key, str) and key.startswith(DIRECTIVE_PREFIX):
                key = key.replace(DIRECTIVE_PREFIX, "", 1)
            result[key] = clean_query(value)
        return result
    return query


def normalize_query(params: Mapping | None = None) -> dict[str, Any]:
    """Return the cleaned ``query`` of a service call's params."""
    query = (params or {}).get("query") or {}
    return clean_query(query)
