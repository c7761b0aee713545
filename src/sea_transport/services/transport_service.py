from __future__ import annotations

from sea_transport.db.models import Transport
from sea_transport.db.repositories.transports import TransportRepo
from sea_transport.services.entity_service import EntityService


class TransportService(EntityService[Transport]):
    repo_cls = TransportRepo
