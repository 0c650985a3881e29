def test_health_check(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_order_summary(client, order_payload):
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 200

    body = res.json()
    assert body["success"] is True
    data = body["data"]
    assert data["order_number"] == "SO-2024-017"
    assert data["status"] == "OPEN"
    assert data["status_display"] == "Open"

    summary = data["summary"]
    assert summary["total_ordered_quantity"] == 47
    assert summary["total_fulfilled_quantity"] == 15
    assert summary["total_shipped_quantity"] == 13
    assert summary["completed_items_count"] == 1
    assert summary["completion_rate"] == 32
    assert summary["shipping_rate"] == 28
    assert len(summary["signature"]) == 64

    deadlines = data["deadlines"]
    assert deadlines["as_of"] == "2024-06-01"
    assert deadlines["buckets"] == {"overdue": 1, "due_this_week": 1, "due_this_month": 2}


def test_order_summary_item_rows(client, order_payload):
    res = client.post("/sales/orders/summary", json=order_payload)
    items = {i["id"]: i for i in res.json()["data"]["items"]}

    assert items[1]["progress"] == "COMPLETE"
    assert items[1]["shipped_quantity"] == 10
    assert items[1]["stock_status"] == "COMPLETE"
    assert items[1]["deadline_status"] == "COMPLETED"

    assert items[2]["remaining_quantity"] == 2
    assert items[2]["progress_percent"] == 60
    assert items[2]["stock_status"] == "SUFFICIENT"
    assert items[2]["kapsam_deadline_date"] == "2024-06-15"
    assert items[2]["due_this_week"] is True

    assert items[3]["fulfilled_quantity"] == 0
    assert items[3]["overdue"] is True
    assert items[3]["stock_status"] == "INSUFFICIENT"

    assert items[4]["product_code"] is None
    assert items[4]["current_stock"] == 0
    assert items[4]["deadline_status"] == "DUE_THIS_MONTH"


def test_order_summary_with_no_items(client, order_payload):
    order_payload["items"] = []
    order_payload["shipments"] = []
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 200
    summary = res.json()["data"]["summary"]
    assert summary["completion_rate"] == 0
    assert summary["shipping_rate"] == 0


def test_as_of_overrides_today(client, order_payload):
    res = client.post(
        "/sales/orders/deadlines",
        params={"as_of": "2024-07-01"},
        json={"items": order_payload["items"]},
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["as_of"] == "2024-07-01"
    assert data["buckets"]["overdue"] == 3


def test_deadline_statuses(client, order_payload):
    res = client.post("/sales/orders/deadlines", json={"items": order_payload["items"]})
    assert res.json()["data"]["statuses"] == {
        "completed": 1,
        "overdue": 1,
        "due_this_week": 1,
        "due_this_month": 1,
        "due_later": 1,
    }


def test_stock_status(client, order_payload):
    res = client.post("/sales/orders/items/stock-status", json={"items": order_payload["items"]})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["total"] == 5
    assert data["insufficient_count"] == 3
    needs_production = [i["id"] for i in data["items"] if i["needs_production"]]
    assert needs_production == [3, 4, 5]


def test_negative_quantity_rejected(client, order_payload):
    order_payload["items"][0]["fulfilled_quantity"] = -1
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 422
    body = res.json()
    assert body["success"] is False
    assert body["error_code"] == "VALIDATION_ERROR"


def test_zero_ordered_quantity_rejected(client, order_payload):
    order_payload["items"][0]["ordered_quantity"] = 0
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 422


def test_non_numeric_quantity_rejected(client, order_payload):
    order_payload["items"][0]["ordered_quantity"] = "ten"
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 422


def test_duplicate_item_ids_rejected(client, order_payload):
    order_payload["items"][1]["id"] = 1
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 422


def test_shipment_for_unknown_item_rejected(client, order_payload):
    order_payload["shipments"][0]["order_item"] = 99
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 422


def test_unknown_status_rejected(client, order_payload):
    order_payload["status"] = "PENDING_APPROVAL"
    res = client.post("/sales/orders/summary", json=order_payload)
    assert res.status_code == 422


def test_order_report_pdf(client, order_payload):
    res = client.post("/sales/orders/report", json=order_payload)
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/pdf"
    assert "order_SO-2024-017.pdf" in res.headers["content-disposition"]
    assert res.content.startswith(b"%PDF")


def test_order_report_escapes_markup(client, order_payload):
    order_payload["customer_name"] = "Smith & Sons <Ltd>"
    res = client.post("/sales/orders/report", json=order_payload)
    assert res.status_code == 200


def test_unknown_route_uses_error_envelope(client):
    res = client.get("/sales/orders/missing")
    assert res.status_code == 404
    assert res.json()["error_code"] == "NOT_FOUND"
