from __future__ import annotations

from sea_transport.db.models import Status
from sea_transport.db.repositories.base import EntityRepo


class StatusRepo(EntityRepo[Status]):
    model = Status
