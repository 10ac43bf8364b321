"""
Purchase order documents as stored in the "purchaseOrders" collection.
"""
import random
from datetime import datetime, timezone

from bson import ObjectId

ORDER_PENDING = "OrderPending"
ORDER_PROCESSING = "OrderProcessing"
ORDER_SHIPPED = "OrderShipped"
ORDER_DELIVERED = "OrderDelivered"
ORDER_CANCELLED = "OrderCancelled"

ORDER_STATUSES = (
    ORDER_PENDING,
    ORDER_PROCESSING,
    ORDER_SHIPPED,
    ORDER_DELIVERED,
    ORDER_CANCELLED,
)

# Marks the document written by the bootstrap routine; never a real order state.
SYSTEM_TEST_STATUS = "SystemTest"

MAX_PRICE = 1000


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def random_price() -> float:
    return float(random.randrange(MAX_PRICE))


def calculate_total_amount(products) -> float:
    return float(sum(p["price"] * p["quantity"] for p in products))


def product_doc(name: str, price: float, quantity: int = 1, now: datetime = None) -> dict:
    return {
        "name": name,
        "price": price,
        "quantity": quantity,
        "updatedAt": now or utc_now(),
        "status": "",
        "remarks": "",
    }


def order_doc(user: str, products, status: str = ORDER_PENDING, now: datetime = None) -> dict:
    if status not in ORDER_STATUSES:
        raise ValueError(f"unknown order status: {status}")
    now = now or utc_now()
    products = list(products)
    return {
        "_id": ObjectId(),
        "version": 1,
        "createdAt": now,
        "updatedAt": now,
        "products": products,
        "user": user,
        "totalAmount": calculate_total_amount(products),
        "status": status,
        "updates": [],
    }


def verification_doc(now: datetime = None) -> dict:
    now = now or utc_now()
    return {
        "_id": ObjectId(),
        "user": "system@test.com",
        "status": SYSTEM_TEST_STATUS,
        "totalAmount": 0,
        "products": [],
        "createdAt": now,
        "updatedAt": now,
        "version": 1,
    }
