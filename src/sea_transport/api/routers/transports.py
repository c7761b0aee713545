"""
sea_transport.api.routers.transports

REST resource for `Transport` under `/api/transports`.
"""

from __future__ import annotations

from sea_transport.api.resource import build_entity_router
from sea_transport.api.schemas import TransportPatchRequest, TransportRequest, TransportResponse
from sea_transport.services.transport_service import TransportService

router = build_entity_router(
    path="/api/transports",
    service_cls=TransportService,
    request_model=TransportRequest,
    patch_model=TransportPatchRequest,
    response_model=TransportResponse,
)
