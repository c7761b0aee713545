from __future__ import annotations

from sea_transport.db.models import Transport
from sea_transport.db.repositories.base import EntityRepo


class TransportRepo(EntityRepo[Transport]):
    model = Transport
