"""Tests for the beer stock HTTP endpoints."""

import pytest
from httpx import AsyncClient

BASE_URL = "/api/v1/beers"


async def register(client: AsyncClient, payload: dict) -> dict:
    response = await client.post(BASE_URL, json=payload)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


@pytest.mark.asyncio
async def test_create_beer(client: AsyncClient, beer_payload: dict) -> None:
    beer = await register(client, beer_payload)

    assert beer["id"] == 1
    assert beer["name"] == "Brahma"
    assert beer["quantity"] == 10
    assert beer["type"] == "LAGER"


@pytest.mark.asyncio
async def test_create_beer_ignores_client_id(client: AsyncClient, beer_payload: dict) -> None:
    beer = await register(client, {**beer_payload, "id": 42})

    assert beer["id"] == 1


@pytest.mark.asyncio
async def test_create_duplicate_beer(client: AsyncClient, beer_payload: dict) -> None:
    await register(client, beer_payload)

    response = await client.post(BASE_URL, json={**beer_payload, "brand": "Other"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Beer with name Brahma already registered in the system."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "override",
    [
        {"name": ""},
        {"brand": "x" * 201},
        {"max": 501},
        {"quantity": 101},
        {"quantity": -1},
        {"quantity": 60, "max": 50},
        {"type": "PILSNER"},
    ],
)
async def test_create_invalid_beer(client: AsyncClient, beer_payload: dict, override: dict) -> None:
    response = await client.post(BASE_URL, json={**beer_payload, **override})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_beer_missing_field(client: AsyncClient, beer_payload: dict) -> None:
    del beer_payload["brand"]

    response = await client.post(BASE_URL, json=beer_payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_find_by_name(client: AsyncClient, beer_payload: dict) -> None:
    created = await register(client, beer_payload)

    response = await client.get(f"{BASE_URL}/Brahma")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_find_by_unknown_name(client: AsyncClient) -> None:
    response = await client.get(f"{BASE_URL}/Heineken")

    assert response.status_code == 404
    assert response.json()["detail"] == "Beer not found with name Heineken"


@pytest.mark.asyncio
async def test_list_beers_empty(client: AsyncClient) -> None:
    response = await client.get(BASE_URL)

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_beers(client: AsyncClient, beer_payload: dict) -> None:
    await register(client, beer_payload)
    await register(client, {**beer_payload, "name": "Colorado Indica", "type": "IPA"})

    response = await client.get(BASE_URL)

    assert response.status_code == 200
    beers = response.json()
    assert [beer["name"] for beer in beers] == ["Brahma", "Colorado Indica"]


@pytest.mark.asyncio
async def test_delete_beer(client: AsyncClient, beer_payload: dict) -> None:
    created = await register(client, beer_payload)

    response = await client.delete(f"{BASE_URL}/{created['id']}")
    assert response.status_code == 204

    response = await client.get(f"{BASE_URL}/Brahma")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_beer(client: AsyncClient) -> None:
    response = await client.delete(f"{BASE_URL}/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "Beer not found with ID 99"


@pytest.mark.asyncio
async def test_increment(client: AsyncClient, beer_payload: dict) -> None:
    created = await register(client, beer_payload)

    response = await client.patch(f"{BASE_URL}/{created['id']}/increment", json={"quantity": 10})

    assert response.status_code == 200
    assert response.json()["quantity"] == 20


@pytest.mark.asyncio
async def test_increment_above_max(client: AsyncClient, beer_payload: dict) -> None:
    created = await register(client, beer_payload)

    response = await client.patch(f"{BASE_URL}/{created['id']}/increment", json={"quantity": 45})

    assert response.status_code == 400
    assert "exceeds the max stock capacity" in response.json()["detail"]
    stored = await client.get(f"{BASE_URL}/Brahma")
    assert stored.json()["quantity"] == 10


@pytest.mark.asyncio
async def test_stock_above_initial_limit(client: AsyncClient, beer_payload: dict) -> None:
    """Stock can grow past the initial quantity limit as long as it stays within max."""
    created = await register(client, {**beer_payload, "max": 500, "quantity": 100})

    response = await client.patch(f"{BASE_URL}/{created['id']}/increment", json={"quantity": 100})
    assert response.status_code == 200
    assert response.json()["quantity"] == 200

    response = await client.get(BASE_URL)
    assert response.status_code == 200
    assert response.json()[0]["quantity"] == 200


@pytest.mark.asyncio
async def test_decrement(client: AsyncClient, beer_payload: dict) -> None:
    created = await register(client, beer_payload)

    response = await client.patch(f"{BASE_URL}/{created['id']}/decrement", json={"quantity": 5})

    assert response.status_code == 200
    assert response.json()["quantity"] == 5


@pytest.mark.asyncio
async def test_decrement_to_empty_stock(client: AsyncClient, beer_payload: dict) -> None:
    created = await register(client, beer_payload)

    response = await client.patch(f"{BASE_URL}/{created['id']}/decrement", json={"quantity": 10})

    assert response.status_code == 200
    assert response.json()["quantity"] == 0


@pytest.mark.asyncio
async def test_decrement_below_zero(client: AsyncClient, beer_payload: dict) -> None:
    created = await register(client, beer_payload)

    response = await client.patch(f"{BASE_URL}/{created['id']}/decrement", json={"quantity": 80})

    assert response.status_code == 400
    assert response.json()["detail"] == "Beers with 1 ID does not contains value to decrement: 80"
    stored = await client.get(f"{BASE_URL}/Brahma")
    assert stored.json()["quantity"] == 10


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["increment", "decrement"])
async def test_adjust_unknown_beer(client: AsyncClient, action: str) -> None:
    response = await client.patch(f"{BASE_URL}/99/{action}", json={"quantity": 1})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, 101])
async def test_adjust_with_invalid_quantity(client: AsyncClient, beer_payload: dict, quantity: int) -> None:
    created = await register(client, beer_payload)

    response = await client.patch(
        f"{BASE_URL}/{created['id']}/increment", json={"quantity": quantity}
    )

    assert response.status_code == 422
