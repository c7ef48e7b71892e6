"""
End-to-end flows through the real Flask app and an in-memory store.
"""

import pytest


def _create(client, payload):
    resp = client.post("/inventory", json=payload)
    assert resp.status_code == 201
    return resp.get_json()


@pytest.mark.api
def test_widget_lifecycle(client, widget_payload):
    created = _create(client, widget_payload)
    inventory_id = created["inventoryId"]
    assert inventory_id
    assert created["quantity"] == 5

    resp = client.put(
        "/inventory", json={**widget_payload, "inventoryId": inventory_id, "quantity": 3}
    )
    assert resp.status_code == 200
    assert resp.get_json()["quantity"] == 3

    resp = client.get(f"/inventory/{inventory_id}")
    assert resp.status_code == 200
    assert resp.get_json()["quantity"] == 3

    resp = client.delete("/inventory", query_string={"inventoryId": inventory_id})
    assert resp.status_code == 204

    resp = client.get(f"/inventory/{inventory_id}")
    assert resp.status_code == 404


@pytest.mark.api
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Widget", "quantity": 5, "price": 9.99},
        {"name": "Gadget", "quantity": 0, "price": 0},
        {"name": "Cable", "quantity": 40, "price": 3.25, "category": "hardware",
         "description": "USB-C, 1 meter"},
    ],
)
def test_create_then_get_returns_input_plus_id(client, payload):
    created = _create(client, payload)

    resp = client.get(f"/inventory/{created['inventoryId']}")

    assert resp.status_code == 200
    fetched = resp.get_json()
    assert fetched == created
    for key, value in payload.items():
        assert fetched[key] == value


@pytest.mark.api
def test_never_issued_id_returns_404_without_record(client):
    resp = client.get("/inventory/never-issued")

    assert resp.status_code == 404
    body = resp.get_json()
    assert body["success"] is False
    assert "name" not in body
    assert "data" not in body


@pytest.mark.api
def test_update_and_delete_of_unknown_id_return_404(client, widget_payload):
    resp = client.put("/inventory", json={**widget_payload, "inventoryId": "unknown"})
    assert resp.status_code == 404

    resp = client.put("/inventory/unknown", json=widget_payload)
    assert resp.status_code == 404

    resp = client.delete("/inventory/unknown")
    assert resp.status_code == 404

    assert client.get("/inventory").get_json() == []


@pytest.mark.api
def test_second_delete_returns_404(client, widget_payload):
    inventory_id = _create(client, widget_payload)["inventoryId"]

    assert client.delete(f"/inventory/{inventory_id}").status_code == 204
    assert client.delete(f"/inventory/{inventory_id}").status_code == 404


@pytest.mark.api
def test_list_membership_is_created_minus_deleted(client):
    ids = {}
    for name in ("Widget", "Gadget", "Cable", "Bolt"):
        ids[name] = _create(client, {"name": name})["inventoryId"]

    client.delete("/inventory", json={"inventoryId": ids["Gadget"]})
    client.delete(f"/inventory/{ids['Bolt']}")

    resp = client.get("/inventory/")
    assert resp.status_code == 200
    listed = {item["inventoryId"] for item in resp.get_json()}
    assert listed == {ids["Widget"], ids["Cable"]}


@pytest.mark.api
def test_update_is_full_replace(client):
    created = _create(
        client, {"name": "Widget", "quantity": 5, "category": "hardware", "description": "blue"}
    )

    resp = client.put(f"/inventory/{created['inventoryId']}", json={"name": "Widget v2"})

    assert resp.status_code == 200
    fetched = client.get(f"/inventory/{created['inventoryId']}").get_json()
    assert fetched["name"] == "Widget v2"
    assert fetched["quantity"] == 0
    assert fetched["category"] is None
    assert fetched["description"] is None


@pytest.mark.api
def test_last_write_wins(client, widget_payload):
    inventory_id = _create(client, widget_payload)["inventoryId"]

    client.put(f"/inventory/{inventory_id}", json={**widget_payload, "quantity": 1})
    client.put(f"/inventory/{inventory_id}", json={**widget_payload, "quantity": 2})

    assert client.get(f"/inventory/{inventory_id}").get_json()["quantity"] == 2


@pytest.mark.api
def test_create_ignores_client_supplied_id(client, widget_payload):
    created = _create(client, {**widget_payload, "inventoryId": "forged"})

    assert created["inventoryId"] != "forged"
    assert client.get("/inventory/forged").status_code == 404


@pytest.mark.api
def test_invalid_create_does_not_persist(client):
    resp = client.post("/inventory", json={"name": "Widget", "price": -1})

    assert resp.status_code == 400
    assert client.get("/inventory").get_json() == []


@pytest.mark.api
@pytest.mark.parametrize("quantity", [2**63, 10**20])
def test_oversized_quantity_is_rejected_before_the_store(client, quantity):
    resp = client.post("/inventory", json={"name": "Widget", "quantity": quantity, "price": 1})

    assert resp.status_code == 400
    assert any(e.startswith("quantity:") for e in resp.get_json()["data"]["errors"])
    assert client.get("/inventory").get_json() == []


@pytest.mark.api
def test_largest_quantity_round_trips(client):
    created = _create(client, {"name": "Widget", "quantity": 2**31 - 1})

    fetched = client.get(f"/inventory/{created['inventoryId']}").get_json()

    assert fetched["quantity"] == 2**31 - 1
