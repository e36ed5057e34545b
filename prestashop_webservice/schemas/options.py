"""
schemas/options.py
------------------

Typed option sets for each web service operation. Callers may pass a
model instance or a plain mapping using the legacy option keys
(``resource``, ``id``, ``url``, ``postXml``/``putXml``, ``filter[...]``,
``display``, ``sort``, ``limit``, ``id_shop``, ``id_group_shop``).
Mappings are validated once, by :func:`load_options`, which turns any
validation failure into :class:`InvalidOptionsError` for the operation
at hand.

For read operations every key containing one of the query markers is
gathered into ``query`` and later forwarded as a URL query parameter.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator

from prestashop_webservice.core.errors import InvalidOptionsError

Identifier = Union[int, str]

READ_QUERY_MARKERS: Tuple[str, ...] = ("filter", "display", "sort", "limit")
SHOP_MARKERS: Tuple[str, ...] = ("id_shop", "id_group_shop")


class _Options(BaseModel):
    resource: Optional[str] = None
    url: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class _ReadOptions(_Options):
    id: Optional[Identifier] = None
    query: Dict[str, Any] = Field(default_factory=dict)

    query_markers: ClassVar[Tuple[str, ...]] = READ_QUERY_MARKERS

    @model_validator(mode="before")
    @classmethod
    def collect_query(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        query = dict(data.get("query") or {})
        for key in list(data):
            if key == "query":
                continue
            if isinstance(key, str) and any(marker in key for marker in cls.query_markers):
                query[key] = data.pop(key)
        data["query"] = query
        return data

    @model_validator(mode="after")
    def check_target(self) -> "_ReadOptions":
        if self.url is None and not self.resource:
            raise ValueError("either 'url' or 'resource' is required")
        return self


class GetOptions(_ReadOptions):
    """Options for ``get``: shop context keys are forwarded as well."""

    query_markers: ClassVar[Tuple[str, ...]] = READ_QUERY_MARKERS + SHOP_MARKERS


class HeadOptions(_ReadOptions):
    """Options for ``head``."""


class _ShopContext(_Options):
    id_shop: Optional[Identifier] = None
    id_group_shop: Optional[Identifier] = None


class AddOptions(_ShopContext):
    xml: str = Field(min_length=1, validation_alias=AliasChoices("xml", "postXml", "putXml"))

    @model_validator(mode="after")
    def check_target(self) -> "AddOptions":
        if self.url is None and not self.resource:
            raise ValueError("either 'url' or 'resource' is required")
        return self


class EditOptions(_ShopContext):
    id: Optional[Identifier] = None
    xml: str = Field(min_length=1, validation_alias=AliasChoices("xml", "putXml", "postXml"))

    @model_validator(mode="after")
    def check_target(self) -> "EditOptions":
        if self.url is None and not (self.resource and self.id is not None):
            raise ValueError("either 'url' or both 'resource' and 'id' are required")
        return self


class DeleteOptions(_ShopContext):
    id: Optional[Union[List[Identifier], Identifier]] = None

    @model_validator(mode="after")
    def check_target(self) -> "DeleteOptions":
        if self.url is None and not (self.resource and self.id is not None):
            raise ValueError("either 'url' or both 'resource' and 'id' are required")
        if isinstance(self.id, list) and not self.id:
            raise ValueError("'id' list must not be empty")
        return self


OptionsT = TypeVar("OptionsT", bound=_Options)


def load_options(model: Type[OptionsT], options: Any, operation: str) -> OptionsT:
    """Validate ``options`` into ``model`` or raise :class:`InvalidOptionsError`."""
    if isinstance(options, model):
        return options
    if isinstance(options, BaseModel):
        options = options.model_dump(exclude_none=True)
    if not isinstance(options, Mapping):
        raise InvalidOptionsError(operation, f"expected a mapping, got {type(options).__name__}")
    try:
        return model.model_validate(options)
    except ValidationError as exc:
        detail = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidOptionsError(operation, detail) from exc
