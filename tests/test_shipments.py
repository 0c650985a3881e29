import pytest

from order_fulfillment.constants.error_codes import ErrorCode
from order_fulfillment.core.exceptions import AppException, ShipmentQuantityExceeded
from order_fulfillment.schemas.sales.shipment_schemas import ShipmentValidationRequest
from order_fulfillment.services.sales.shipment_service import validate_shipment


def _request(items, order_item=2, quantity=1, **extra):
    payload = {
        "order_number": "SO-2024-017",
        "items": items,
        "shipment": {
            "shipping_no": "SHP-4",
            "shipping_date": "2024-06-01",
            "order_item": order_item,
            "quantity": quantity,
            "package_number": 1,
        },
    }
    payload.update(extra)
    return payload


def test_service_accepts_quantity_up_to_remaining(order_items):
    out = validate_shipment(ShipmentValidationRequest(**_request(order_items, quantity=2)))
    assert out.valid
    assert out.remaining_quantity == 2
    assert out.remaining_after_shipment == 0


def test_service_rejects_over_shipment(order_items):
    with pytest.raises(ShipmentQuantityExceeded) as exc_info:
        validate_shipment(ShipmentValidationRequest(**_request(order_items, quantity=3)))
    assert exc_info.value.status_code == 422
    assert exc_info.value.details == {"remaining_quantity": 2, "proposed_quantity": 3}


def test_service_rejects_unknown_item(order_items):
    with pytest.raises(AppException) as exc_info:
        validate_shipment(ShipmentValidationRequest(**_request(order_items, order_item=99)))
    assert exc_info.value.error_code == ErrorCode.ORDER_ITEM_NOT_FOUND


def test_validate_endpoint_ok(client, order_items):
    res = client.post("/sales/shipments/validate", json=_request(order_items, order_item=3, quantity=20))
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["valid"] is True
    assert data["remaining_after_shipment"] == 0
    assert data["current_stock"] == 3
    assert data["stock_status"] == "INSUFFICIENT"


def test_validate_endpoint_reports_remaining(client, order_items):
    res = client.post("/sales/shipments/validate", json=_request(order_items, quantity=5))
    assert res.status_code == 422
    body = res.json()
    assert body["success"] is False
    assert body["error_code"] == "SHIPMENT_QUANTITY_EXCEEDED"
    assert body["details"]["remaining_quantity"] == 2
    assert "(2)" in body["message"]


def test_validate_endpoint_rejects_finished_item(client, order_items):
    res = client.post("/sales/shipments/validate", json=_request(order_items, order_item=1, quantity=1))
    assert res.status_code == 422
    assert res.json()["details"]["remaining_quantity"] == 0


def test_validate_endpoint_unknown_item(client, order_items):
    res = client.post("/sales/shipments/validate", json=_request(order_items, order_item=42))
    assert res.status_code == 404
    assert res.json()["error_code"] == "ORDER_ITEM_NOT_FOUND"


def test_signature_round_trip(client, order_payload):
    summary = client.post("/sales/orders/summary", json=order_payload).json()["data"]["summary"]

    res = client.post(
        "/sales/shipments/validate",
        json=_request(order_payload["items"], expected_signature=summary["signature"]),
    )
    assert res.status_code == 200
    assert res.json()["data"]["signature"] == summary["signature"]


def test_stale_signature_conflicts(client, order_payload):
    summary = client.post("/sales/orders/summary", json=order_payload).json()["data"]["summary"]

    # another user shipped against item 2 in the meantime
    order_payload["items"][1]["fulfilled_quantity"] = 5
    res = client.post(
        "/sales/shipments/validate",
        json=_request(order_payload["items"], expected_signature=summary["signature"]),
    )
    assert res.status_code == 409
    assert res.json()["error_code"] == "STALE_ORDER_ITEMS"


@pytest.mark.parametrize(
    "field, value",
    [
        ("quantity", 0),
        ("quantity", 10001),
        ("package_number", 0),
        ("package_number", 1001),
        ("shipping_no", "   "),
        ("shipping_no", ""),
        ("order_item", 0),
        ("shipping_date", "not-a-date"),
    ],
)
def test_shipment_form_rules(client, order_items, field, value):
    payload = _request(order_items)
    payload["shipment"][field] = value
    res = client.post("/sales/shipments/validate", json=payload)
    assert res.status_code == 422
    assert res.json()["error_code"] == "VALIDATION_ERROR"


def test_validate_requires_items(client):
    res = client.post("/sales/shipments/validate", json=_request([]))
    assert res.status_code == 422


def test_shippable_items(client, order_items):
    res = client.post("/sales/shipments/shippable-items", json={"items": order_items})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["total"] == 4
    assert [i["id"] for i in data["items"]] == [2, 3, 4, 5]
    assert data["items"][0]["product_name"] == "Product 2"


def test_no_shippable_items(client, order_items):
    finished = [i for i in order_items if i["id"] == 1]
    res = client.post("/sales/shipments/shippable-items", json={"items": finished})
    body = res.json()
    assert body["data"]["total"] == 0
    assert body["message"] == "All order items are fully shipped"
