"""
sea_transport.errors

Domain-level errors raised below the HTTP layer.

Responsibilities:
- Describe client mistakes (bad ids, bad sort keys) in a transport-neutral way.
- Carry the entity name and a stable error key for alert headers.

The HTTP mapping lives in `sea_transport.api.errors`.
"""

from __future__ import annotations


class BadRequestAlertError(Exception):
    """A request rejected before any write, reported as 400 with alert headers."""

    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


class UnknownSortPropertyError(BadRequestAlertError):
    def __init__(self, entity_name: str, prop: str) -> None:
        super().__init__(f"Unknown sort property: {prop}", entity_name, "badsort")
        self.prop = prop
