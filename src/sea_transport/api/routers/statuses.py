"""
sea_transport.api.routers.statuses

REST resource for `Status` under `/api/statuses`.
"""

from __future__ import annotations

from sea_transport.api.resource import build_entity_router
from sea_transport.api.schemas import StatusPatchRequest, StatusRequest, StatusResponse
from sea_transport.services.status_service import StatusService

router = build_entity_router(
    path="/api/statuses",
    service_cls=StatusService,
    request_model=StatusRequest,
    patch_model=StatusPatchRequest,
    response_model=StatusResponse,
)
