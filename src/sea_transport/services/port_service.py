from __future__ import annotations

from sea_transport.db.models import Port
from sea_transport.db.repositories.ports import PortRepo
from sea_transport.services.entity_service import EntityService


class PortService(EntityService[Port]):
    repo_cls = PortRepo
