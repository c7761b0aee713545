"""
sea_transport.api.headers

Alert headers attached to entity responses.

Responsibilities:
- Build the `X-<app>-alert` / `X-<app>-params` pair for create, update and delete.
- Build the `X-<app>-error` / `X-<app>-params` pair for rejected requests.
"""

from __future__ import annotations

from urllib.parse import quote


def alert(app_name: str, message: str, param: str) -> dict[str, str]:
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": quote(param, safe=""),
    }


def entity_creation_alert(app_name: str, entity_name: str, param: str) -> dict[str, str]:
    return alert(app_name, f"A new {entity_name} is created with identifier {param}", param)


def entity_update_alert(app_name: str, entity_name: str, param: str) -> dict[str, str]:
    return alert(app_name, f"A {entity_name} is updated with identifier {param}", param)


def entity_deletion_alert(app_name: str, entity_name: str, param: str) -> dict[str, str]:
    return alert(app_name, f"A {entity_name} is deleted with identifier {param}", param)


def failure_alert(app_name: str, entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{app_name}-error": f"error.{error_key}",
        f"X-{app_name}-params": entity_name,
    }
