"""Shared base models for request/response DTOs.

Stored documents and the JSON API both use camelCase keys, so every DTO
aliases its snake_case fields with ``to_camel`` and accepts either form.
"""

from dataclasses import fields
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Request body base — unknown fields are rejected.

    Keys listed in ``server_managed_fields`` are silently dropped before
    validation; the server always stamps those itself.
    """

    model_config = ConfigDict(extra="forbid")

    server_managed_fields: ClassVar[frozenset[str]] = frozenset({"_id", "id"})

    @model_validator(mode="before")
    @classmethod
    def drop_server_managed_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if k not in cls.server_managed_fields}
        return data


class DocumentResponse(CamelModel):
    """Response base for stored documents.

    Stored documents are schemaless: modelled fields accept whatever value
    is stored, and keys the model does not know are passed through as-is.
    """

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_entity(cls, entity: Any) -> "DocumentResponse":
        values = {
            f.name: getattr(entity, f.name) for f in fields(entity) if f.name != "extra"
        }
        # Extra keys never shadow a modelled field, by name or by alias.
        reserved = set(values)
        for name, info in cls.model_fields.items():
            reserved.update((name, info.alias or name))
        extra = {key: value for key, value in entity.extra.items() if key not in reserved}
        return cls.model_validate({**extra, **values})
