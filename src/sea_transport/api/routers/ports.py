"""
sea_transport.api.routers.ports

REST resource for `Port` under `/api/ports`.
"""

from __future__ import annotations

from sea_transport.api.resource import build_entity_router
from sea_transport.api.schemas import PortPatchRequest, PortRequest, PortResponse
from sea_transport.services.port_service import PortService

router = build_entity_router(
    path="/api/ports",
    service_cls=PortService,
    request_model=PortRequest,
    patch_model=PortPatchRequest,
    response_model=PortResponse,
)
