from datetime import date

import pytest
from fastapi.testclient import TestClient

from main import app
from order_fulfillment.core.clock import get_today

TODAY = date(2024, 6, 1)


def make_item(item_id, ordered, fulfilled, deadline, stock=None, **extra):
    item = {
        "id": item_id,
        "product": 100 + item_id,
        "ordered_quantity": ordered,
        "fulfilled_quantity": fulfilled,
        "deadline_date": deadline,
    }
    if stock is not None:
        item["product_details"] = {
            "id": 100 + item_id,
            "product_code": f"03.0.00.{item_id:04d}",
            "product_name": f"Product {item_id}",
            "current_stock": stock,
        }
    item.update(extra)
    return item


@pytest.fixture
def order_items():
    return [
        # complete
        make_item(1, 10, 10, "2024-05-20", stock=50),
        # partial, due in 4 days, enough stock
        make_item(2, 5, 3, "2024-06-05", stock=10, kapsam_deadline_date="2024-06-15"),
        # not started, overdue, short on stock
        make_item(3, 20, None, "2024-05-25", stock=3),
        # partial, due this month, no product snapshot
        make_item(4, 8, 2, "2024-06-20"),
        # not started, due later
        make_item(5, 4, 0, "2024-08-01", stock=0),
    ]


@pytest.fixture
def order_payload(order_items):
    return {
        "id": "17",
        "order_number": "SO-2024-017",
        "customer": 3,
        "customer_name": "Acme Makina",
        "status": "OPEN",
        "created_at": "2024-05-01T09:30:00Z",
        "items": order_items,
        "shipments": [
            {"shipping_no": "SHP-1", "shipping_date": "2024-05-10", "order_item": 1,
             "quantity": 6, "package_number": 2},
            {"shipping_no": "SHP-2", "shipping_date": "2024-05-18", "order_item": 1,
             "quantity": 4, "package_number": 1},
            {"shipping_no": "SHP-3", "shipping_date": "2024-05-28", "order_item": 2,
             "quantity": 3, "package_number": 1, "shipping_note": "partial"},
        ],
    }


@pytest.fixture
def client():
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
