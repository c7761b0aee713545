"""
sea_transport.api.schemas

Request/response models for the entity resources.

Responsibilities:
- camelCase JSON on the wire, snake_case attributes in Python.
- Required fields on create/PUT bodies; everything optional on PATCH bodies.
- Keep ids, integers and names inside what the columns can store.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# BIGINT ids, INTEGER value columns, VARCHAR(255) names.
MAX_ID = 2**63 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
NAME_MAX_LENGTH = 255

BodyId = Annotated[int, Field(ge=1, le=MAX_ID)]
Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Name = Annotated[str, Field(max_length=NAME_MAX_LENGTH)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Port


class PortRequest(CamelModel):
    id: BodyId | None = None
    port_name: Name
    capacity: Int32


class PortPatchRequest(CamelModel):
    id: BodyId | None = None
    port_name: Name | None = None
    capacity: Int32 | None = None


class PortResponse(CamelModel):
    id: int
    port_name: str
    capacity: int


# Transport


class TransportRequest(CamelModel):
    id: BodyId | None = None
    transport_name: Name
    max_weight: Int32
    speed: Int32
    deck_size: Int32


class TransportPatchRequest(CamelModel):
    id: BodyId | None = None
    transport_name: Name | None = None
    max_weight: Int32 | None = None
    speed: Int32 | None = None
    deck_size: Int32 | None = None


class TransportResponse(CamelModel):
    id: int
    transport_name: str
    max_weight: int
    speed: int
    deck_size: int


# Status


class StatusRequest(CamelModel):
    id: BodyId | None = None
    status_name: Name


class StatusPatchRequest(CamelModel):
    id: BodyId | None = None
    status_name: Name | None = None


class StatusResponse(CamelModel):
    id: int
    status_name: str
