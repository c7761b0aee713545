from __future__ import annotations

from sea_transport.db.models import Port
from sea_transport.db.repositories.base import EntityRepo


class PortRepo(EntityRepo[Port]):
    model = Port
