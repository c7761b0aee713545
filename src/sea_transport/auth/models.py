"""
sea_transport.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) injected into endpoints.
- Name the authorities the API checks.
"""

from __future__ import annotations

from dataclasses import dataclass

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity.
    """

    subject: str
    roles: frozenset[str]

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles

    def has_any_role(self, *roles: str) -> bool:
        return self.is_admin or not self.roles.isdisjoint(roles)
