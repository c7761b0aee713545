"""
tests.test_ports

Integration tests for the `/api/ports` resource, including paging and sorting.
"""

from __future__ import annotations

import json

import httpx
import pytest

from sea_transport.db.models import Port

pytestmark = pytest.mark.asyncio

ENTITY_API_URL = "/api/ports"
MERGE_PATCH = {"Content-Type": "application/merge-patch+json"}


async def seed_ports(store, capacities: list[int]) -> list[Port]:
    return [
        await store.save(Port(port_name=f"Port {i}", capacity=capacity))
        for i, capacity in enumerate(capacities)
    ]


async def test_create_and_get_port(client: httpx.AsyncClient, auth_headers) -> None:
    r = await client.post(
        ENTITY_API_URL, json={"portName": "Rotterdam", "capacity": 120}, headers=auth_headers
    )
    assert r.status_code == 201
    port_id = r.json()["id"]

    r = await client.get(f"{ENTITY_API_URL}/{port_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"id": port_id, "portName": "Rotterdam", "capacity": 120}


async def test_create_accepts_attribute_names(client: httpx.AsyncClient, auth_headers) -> None:
    r = await client.post(
        ENTITY_API_URL, json={"port_name": "Hamburg", "capacity": 80}, headers=auth_headers
    )
    assert r.status_code == 201
    assert r.json()["portName"] == "Hamburg"


async def test_create_port_with_existing_id(client: httpx.AsyncClient, auth_headers, store) -> None:
    r = await client.post(
        ENTITY_API_URL,
        json={"id": 7, "portName": "Antwerp", "capacity": 60},
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert r.json()["title"] == "A new port cannot already have an ID"
    assert await store.count(Port) == 0


async def test_capacity_must_be_an_integer(
    client: httpx.AsyncClient, auth_headers, store
) -> None:
    r = await client.post(
        ENTITY_API_URL, json={"portName": "Le Havre", "capacity": "lots"}, headers=auth_headers
    )
    assert r.status_code == 400
    assert r.json()["fieldErrors"][0]["field"] == "capacity"
    assert await store.count(Port) == 0


async def test_put_port(client: httpx.AsyncClient, auth_headers, store) -> None:
    (port,) = await seed_ports(store, [10])
    body = {"id": port.id, "portName": "Valencia", "capacity": 11}

    r = await client.put(f"{ENTITY_API_URL}/{port.id}", json=body, headers=auth_headers)

    assert r.status_code == 200
    assert r.json() == body


async def test_patch_port(client: httpx.AsyncClient, auth_headers, store) -> None:
    (port,) = await seed_ports(store, [10])

    r = await client.patch(
        f"{ENTITY_API_URL}/{port.id}",
        content=json.dumps({"id": port.id, "capacity": 25}),
        headers={**auth_headers, **MERGE_PATCH},
    )

    assert r.status_code == 200
    assert r.json() == {"id": port.id, "portName": "Port 0", "capacity": 25}


async def test_patch_with_charset_parameter(client: httpx.AsyncClient, auth_headers, store) -> None:
    (port,) = await seed_ports(store, [10])

    r = await client.patch(
        f"{ENTITY_API_URL}/{port.id}",
        content=json.dumps({"id": port.id, "portName": "Genoa"}),
        headers={**auth_headers, "Content-Type": "application/merge-patch+json; charset=utf-8"},
    )

    assert r.status_code == 200
    assert r.json()["portName"] == "Genoa"


async def test_delete_missing_port_is_no_content(client: httpx.AsyncClient, auth_headers) -> None:
    r = await client.delete(f"{ENTITY_API_URL}/424242", headers=auth_headers)
    assert r.status_code == 204


async def test_list_defaults_to_id_order(client: httpx.AsyncClient, auth_headers, store) -> None:
    ports = await seed_ports(store, [30, 10, 20])

    r = await client.get(ENTITY_API_URL, headers=auth_headers)

    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [p.id for p in ports]
    assert r.headers["x-total-count"] == "3"


async def test_list_sorted_by_json_property(
    client: httpx.AsyncClient, auth_headers, store
) -> None:
    await seed_ports(store, [30, 10, 20])

    r = await client.get(ENTITY_API_URL, params={"sort": "capacity,desc"}, headers=auth_headers)

    assert [p["capacity"] for p in r.json()] == [30, 20, 10]


async def test_list_sorted_by_several_keys(client: httpx.AsyncClient, auth_headers, store) -> None:
    await seed_ports(store, [10, 20, 10])

    r = await client.get(
        ENTITY_API_URL,
        params=[("sort", "capacity,asc"), ("sort", "portName,desc")],
        headers=auth_headers,
    )

    assert [(p["capacity"], p["portName"]) for p in r.json()] == [
        (10, "Port 2"),
        (10, "Port 0"),
        (20, "Port 1"),
    ]


async def test_list_rejects_unknown_sort_property(
    client: httpx.AsyncClient, auth_headers, store
) -> None:
    await seed_ports(store, [10])

    r = await client.get(ENTITY_API_URL, params={"sort": "tonnage,asc"}, headers=auth_headers)

    assert r.status_code == 400
    assert r.json()["errorKey"] == "badsort"
    assert r.headers["x-seatransportapp-error"] == "error.badsort"


async def test_middle_page_links(client: httpx.AsyncClient, auth_headers, store) -> None:
    await seed_ports(store, [1, 2, 3, 4, 5])

    r = await client.get(ENTITY_API_URL, params={"page": 1, "size": 2}, headers=auth_headers)

    assert r.status_code == 200
    assert [p["capacity"] for p in r.json()] == [3, 4]
    assert r.headers["x-total-count"] == "5"
    assert r.headers["link"] == ",".join(
        [
            '<http://test/api/ports?page=2&size=2>; rel="next"',
            '<http://test/api/ports?page=0&size=2>; rel="prev"',
            '<http://test/api/ports?page=2&size=2>; rel="last"',
            '<http://test/api/ports?page=0&size=2>; rel="first"',
        ]
    )


async def test_last_page_has_no_next_link(client: httpx.AsyncClient, auth_headers, store) -> None:
    await seed_ports(store, [1, 2, 3])

    r = await client.get(ENTITY_API_URL, params={"page": 1, "size": 2}, headers=auth_headers)

    assert [p["capacity"] for p in r.json()] == [3]
    assert 'rel="next"' not in r.headers["link"]
    assert 'rel="prev"' in r.headers["link"]


async def test_links_keep_sort_parameter(client: httpx.AsyncClient, auth_headers, store) -> None:
    await seed_ports(store, [1, 2, 3])

    r = await client.get(
        ENTITY_API_URL, params={"sort": "capacity,desc", "size": 2}, headers=auth_headers
    )

    assert '<http://test/api/ports?sort=capacity%2Cdesc&page=1&size=2>; rel="next"' in (
        r.headers["link"]
    )


async def test_empty_list(client: httpx.AsyncClient, auth_headers) -> None:
    r = await client.get(ENTITY_API_URL, headers=auth_headers)

    assert r.json() == []
    assert r.headers["x-total-count"] == "0"
    assert r.headers["link"] == (
        '<http://test/api/ports?page=0&size=20>; rel="last",'
        '<http://test/api/ports?page=0&size=20>; rel="first"'
    )


async def test_page_size_is_clamped(client: httpx.AsyncClient, auth_headers, settings) -> None:
    r = await client.get(
        ENTITY_API_URL, params={"size": settings.max_page_size + 1}, headers=auth_headers
    )

    assert r.status_code == 200
    assert f"size={settings.max_page_size}" in r.headers["link"]


async def test_negative_page_is_rejected(client: httpx.AsyncClient, auth_headers) -> None:
    r = await client.get(ENTITY_API_URL, params={"page": -1}, headers=auth_headers)

    assert r.status_code == 400
    assert r.json()["fieldErrors"][0]["objectName"] == "query"


@pytest.mark.parametrize("method", ["GET", "DELETE"])
async def test_path_id_out_of_range_is_rejected(
    client: httpx.AsyncClient, auth_headers, method
) -> None:
    r = await client.request(method, f"{ENTITY_API_URL}/{2**64}", headers=auth_headers)

    assert r.status_code == 400
    problem = r.json()
    assert problem["message"] == "error.validation"
    assert problem["fieldErrors"][0]["objectName"] == "path"
    assert problem["fieldErrors"][0]["field"] == "entity_id"


async def test_put_with_id_out_of_range_is_rejected(
    client: httpx.AsyncClient, auth_headers, store
) -> None:
    huge = 10**20
    body = {"id": huge, "portName": "Bremen", "capacity": 10}

    r = await client.put(f"{ENTITY_API_URL}/{huge}", json=body, headers=auth_headers)

    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["fieldErrors"]}
    assert fields == {"entity_id", "id"}
    assert await store.count(Port) == 0


@pytest.mark.parametrize("capacity", [10**20, 2**31, -(2**31) - 1])
async def test_capacity_out_of_range_is_rejected(
    client: httpx.AsyncClient, auth_headers, store, capacity
) -> None:
    r = await client.post(
        ENTITY_API_URL, json={"portName": "Gdansk", "capacity": capacity}, headers=auth_headers
    )

    assert r.status_code == 400
    assert r.json()["fieldErrors"][0]["field"] == "capacity"
    assert await store.count(Port) == 0


async def test_capacity_at_integer_bounds_is_stored(
    client: httpx.AsyncClient, auth_headers
) -> None:
    for capacity in (2**31 - 1, -(2**31)):
        r = await client.post(
            ENTITY_API_URL, json={"portName": "Gdansk", "capacity": capacity}, headers=auth_headers
        )
        assert r.status_code == 201
        assert r.json()["capacity"] == capacity


async def test_patch_capacity_out_of_range_is_rejected(
    client: httpx.AsyncClient, auth_headers, store
) -> None:
    (port,) = await seed_ports(store, [5])

    r = await client.patch(
        f"{ENTITY_API_URL}/{port.id}",
        content=json.dumps({"id": port.id, "capacity": 10**20}),
        headers={**auth_headers, **MERGE_PATCH},
    )

    assert r.status_code == 400
    assert r.json()["fieldErrors"][0]["field"] == "capacity"
    assert (await store.find_all(Port))[0].capacity == 5
