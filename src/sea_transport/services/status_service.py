from __future__ import annotations

from sea_transport.db.models import Status
from sea_transport.db.repositories.statuses import StatusRepo
from sea_transport.services.entity_service import EntityService


class StatusService(EntityService[Status]):
    repo_cls = StatusRepo
