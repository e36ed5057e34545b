"""
core/urls.py
------------

Request targets for each operation. An explicit ``url`` option always
wins; otherwise the target is derived from the base URL and the
resource name (``{base}/api/{resource}``), plus the id and the query
parameters the operation supports.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from prestashop_webservice.schemas.options import (
    AddOptions,
    DeleteOptions,
    EditOptions,
    GetOptions,
    HeadOptions,
)


def resource_url(base_url: str, resource: Optional[str], id: Any = None) -> str:
    url = f"{base_url}/api/{resource}"
    if id is not None:
        url += f"/{id}"
    return url


def append_query_param(url: str, name: str, value: Any) -> str:
    """Append ``name=value`` using ``?`` or ``&`` depending on ``url``."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{name}={value}"


def append_shop_context(url: str, options: Any) -> str:
    for name in ("id_shop", "id_group_shop"):
        value = getattr(options, name, None)
        if value is not None:
            url = append_query_param(url, name, value)
    return url


def _flatten(name: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub, item in value.items():
            _flatten(f"{name}[{sub}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{name}[{index}]", item, pairs)
    elif isinstance(value, bool):
        pairs.append((name, "1" if value else "0"))
    else:
        pairs.append((name, str(value)))


def build_query(params: Mapping[str, Any]) -> str:
    """Percent-encode ``params``, expanding nested values like PHP's ``http_build_query``.

    ``{"display": ["id", "name"]}`` becomes ``display[0]=id&display[1]=name``
    (brackets encoded); ``None`` values are left out.
    """
    pairs: List[Tuple[str, str]] = []
    for name, value in params.items():
        _flatten(name, value, pairs)
    return urlencode(pairs)


def build_get_url(base_url: str, options: GetOptions) -> str:
    """``{base}/api/{resource}[/{id}]/?output_format=JSON[&query...]``."""
    if options.url is not None:
        return options.url
    params = {"output_format": "JSON"}
    params.update(options.query)
    return f"{resource_url(base_url, options.resource, options.id)}/?{build_query(params)}"


def build_head_url(base_url: str, options: HeadOptions) -> str:
    if options.url is not None:
        return options.url
    url = resource_url(base_url, options.resource, options.id)
    query = build_query(options.query)
    if query:
        url += "?" + query
    return url


def build_add_url(base_url: str, options: AddOptions) -> str:
    url = options.url if options.url is not None else resource_url(base_url, options.resource)
    return append_shop_context(url, options)


def build_edit_url(base_url: str, options: EditOptions) -> str:
    if options.url is not None:
        url = options.url
    else:
        url = resource_url(base_url, options.resource, options.id)
    return append_shop_context(url, options)


def build_delete_url(base_url: str, options: DeleteOptions) -> str:
    """A list of ids deletes in bulk with ``?id=[1,2,3]``."""
    if options.url is not None:
        url = options.url
    elif isinstance(options.id, list):
        ids = ",".join(str(i) for i in options.id)
        url = f"{resource_url(base_url, options.resource)}/?id=[{ids}]"
    else:
        url = resource_url(base_url, options.resource, options.id)
    return append_shop_context(url, options)


def build_schema_url(base_url: str, resource: str) -> str:
    return f"{base_url}/api/{resource.lower()}?schema=blank"
