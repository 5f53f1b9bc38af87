"""
Query string parsing for service routes.

Turns ``?$limit=25&created[gte]=1700000000&expand[]=data.source`` into
``{"$limit": 25, "created": {"gte": "1700000000"}, "expand": ["data.source"]}``
so the services receive the same structure a programmatic caller would pass.
"""

import re
from typing import Any

from starlette.datastructures import QueryParams

_BRACKETS = re.compile(r"\[([^\]]*)\]")
LIMIT_KEYS = ("$limit", "limit")
PAGINATE_KEY = "$paginate"


def _split_key(key: str) -> list[str]:
    head, bracket, rest = key.partition("[")
    if not bracket:
        return [key]
    return [head, *_BRACKETS.findall(bracket + rest)]


def parse_query(query_params: QueryParams) -> dict[str, Any]:
    query: dict[str, Any] = {}
    for key, value in query_params.multi_items():
        path = _split_key(key)
        as_list = len(path) > 1 and path[-1] == ""
        if as_list:
            path = path[:-1]
        *parents, last = path

        target = query
        for part in parents:
            # Bracketed keys win over a plain value under the same name
            if not isinstance(target.get(part), dict):
                target[part] = {}
            target = target[part]

        existing = target.get(last)
        if as_list:
            if not isinstance(existing, list):
                existing = target[last] = [] if existing is None else [existing]
            existing.append(value)
        elif existing is None:
            target[last] = value
        elif isinstance(existing, dict):
            continue
        elif isinstance(existing, list):
            existing.append(value)
        else:
            target[last] = [existing, value]

    for key in LIMIT_KEYS:
        if isinstance(query.get(key), str) and query[key].isdigit():
            query[key] = int(query[key])
    return query


def build_params(query_params: QueryParams) -> dict[str, Any]:
    """Service params for a request: the parsed query plus the pagination switch."""
    query = parse_query(query_params)
    params: dict[str, Any] = {"query": query}
    paginate = query.pop(PAGINATE_KEY, None)
    if isinstance(paginate, str) and paginate.lower() in {"false", "0", "no"}:
        params["paginate"] = False
    return params
