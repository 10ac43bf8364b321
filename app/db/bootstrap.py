"""
First-boot initialization of the ecommerce database.

Creates the application user, the purchase order indexes and a verification
document. Runs exactly once against a fresh instance: there are no existence
checks, so a second run fails on user creation.
"""
from pymongo import ASCENDING, DESCENDING

from app.db.models import verification_doc

DB_NAME = "ecommerce"
APP_USER = "ecommerce_service"
APP_PASSWORD = "ecommerce_secure_password"
APP_ROLE = "readWrite"
ORDERS_COLLECTION = "purchaseOrders"

ORDER_INDEXES = [
    [("user", ASCENDING)],
    [("createdAt", DESCENDING)],
    [("status", ASCENDING)],
]


def select_database(client, name: str = DB_NAME):
    db = client[name]
    print(f"Current database: {db.name}")
    return db


def create_user(db, username: str = APP_USER, password: str = APP_PASSWORD):
    # Only access to the selected database
    roles = [{"role": APP_ROLE, "db": db.name}]
    db.command("createUser", username, pwd=password, roles=roles)
    print(f"Created application user: {username}")


def create_indexes(db):
    orders = db[ORDERS_COLLECTION]
    names = [orders.create_index(keys, background=True) for keys in ORDER_INDEXES]
    print("Created performance indexes")
    return names


def insert_verification_document(db):
    result = db[ORDERS_COLLECTION].insert_one(verification_doc())
    print(f"Inserted test document in database: {db.name}")
    return result.inserted_id


def run(client):
    print(f"Initializing {DB_NAME} database...")

    db = select_database(client)
    create_user(db)
    create_indexes(db)
    insert_verification_document(db)

    print("Database initialization completed successfully!")
    return db
