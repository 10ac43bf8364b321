import os
import random

from dotenv import load_dotenv

from app.db.bootstrap import ORDERS_COLLECTION
from app.db.models import ORDER_PENDING, order_doc, product_doc, random_price
from app.services.db import get_client, get_db

first_names = [
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Elizabeth", "David", "Barbara", "Richard", "Susan", "Joseph", "Jessica",
    "Thomas", "Sarah", "Charles", "Karen", "Christopher", "Nancy", "Daniel", "Lisa",
]

surnames = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
]

product_names = [
    "Wireless Mouse", "Mechanical Keyboard", "USB-C Hub", "Laptop Stand", "Monitor Arm",
    "Noise Cancelling Headphones", "Webcam", "Desk Lamp", "Office Chair", "Standing Desk",
    "External SSD", "Phone Charger", "Bluetooth Speaker", "Smart Watch", "Backpack",
]


def fake_email() -> str:
    first = random.choice(first_names).lower()
    last = random.choice(surnames).lower()
    return f"{first}.{last}{random.randint(1, 9999)}@example.com"


def fake_order() -> dict:
    products = [
        product_doc(random.choice(product_names), random_price(), random.randint(1, 5))
        for _ in range(2)
    ]
    return order_doc(fake_email(), products, status=ORDER_PENDING)


def seed_orders(db, count=10000, batch_size=1000):
    if batch_size < 1:
        raise ValueError("batch_size must be positive")
    orders = db[ORDERS_COLLECTION]
    inserted = 0
    while inserted < count:
        batch = [fake_order() for _ in range(min(batch_size, count - inserted))]
        orders.insert_many(batch)
        inserted += len(batch)
    print(f"{inserted} purchase orders seeded.")
    return inserted


def run():
    load_dotenv()
    count = int(os.getenv("SEED_RECORD_COUNT", 10000))
    batch_size = int(os.getenv("SEED_BATCH_SIZE", 1000))

    client = get_client()
    try:
        seed_orders(get_db(client=client), count=count, batch_size=batch_size)
    finally:
        client.close()
    print("Seeder finished.")


if __name__ == "__main__":
    run()
