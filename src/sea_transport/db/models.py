"""
sea_transport.db.models

Persistence schema for the sea transport domain.

Responsibilities:
- Define one flat table per entity:
  - Port: a harbour and how many vessels it can take
  - Transport: a vessel with its weight limit, speed and deck size
  - Status: a named state a transport can be in
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from sea_transport.db.base import Base, IdType


class Port(Base):
    __tablename__ = "port"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    port_name: Mapped[str] = mapped_column(String(255), nullable=False)
    capacity: Mapped[int] = mapped_column(nullable=False)

    def __repr__(self) -> str:
        return f"Port(id={self.id!r}, port_name={self.port_name!r}, capacity={self.capacity!r})"


class Transport(Base):
    __tablename__ = "transport"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    transport_name: Mapped[str] = mapped_column(String(255), nullable=False)
    max_weight: Mapped[int] = mapped_column(nullable=False)
    speed: Mapped[int] = mapped_column(nullable=False)
    deck_size: Mapped[int] = mapped_column(nullable=False)

    def __repr__(self) -> str:
        return (
            f"Transport(id={self.id!r}, transport_name={self.transport_name!r}, "
            f"max_weight={self.max_weight!r}, speed={self.speed!r}, deck_size={self.deck_size!r})"
        )


class Status(Base):
    __tablename__ = "status"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    status_name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"Status(id={self.id!r}, status_name={self.status_name!r})"


# --- Module Notes -----------------------------------------------------------
# Table names double as the entity names used in alert headers and errors.
# Keep alembic/versions in sync when adding columns here.
