# app/tests/integration/test_bootstrap_mongo.py
"""
Integration test against a throwaway MongoDB

What this test does:
- Starts an ephemeral MongoDB (with a root user) using testcontainers.
- Runs the first-boot initialization against it.
- Asserts the application user, the purchaseOrders indexes and the
  verification document exist, and that a second run fails.
Notes:
- Requires Docker (testcontainers) locally or on the CI agent; skipped otherwise.
"""

import pytest
from pymongo import MongoClient
from pymongo.errors import OperationFailure

from testcontainers.mongodb import MongoDbContainer

from app.db import bootstrap, verify
from app.services.db import connection_url

pytestmark = pytest.mark.integration

MONGO_IMAGE = "mongo:7.0"


@pytest.fixture(scope="module")
def mongo():
    container = MongoDbContainer(MONGO_IMAGE)
    try:
        container.start()
    except Exception as e:
        pytest.skip(f"Docker is not available for testcontainers: {e}")
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture
def root_client(mongo):
    client = mongo.get_connection_client()
    yield client
    # fresh database for every test
    try:
        client[bootstrap.DB_NAME].command("dropAllUsersFromDatabase")
        client.drop_database(bootstrap.DB_NAME)
    finally:
        client.close()


def test_bootstrap_on_fresh_instance(root_client):
    bootstrap.run(root_client)

    db = root_client[bootstrap.DB_NAME]
    results = verify.run_checks(db)
    assert all(r.ok for r in results), results

    doc = db["purchaseOrders"].find_one({"status": "SystemTest"})
    assert doc["user"] == "system@test.com"
    assert doc["totalAmount"] == 0
    assert doc["version"] == 1


def test_rerun_fails_on_user_creation(root_client):
    bootstrap.run(root_client)

    with pytest.raises(OperationFailure):
        bootstrap.run(root_client)

    # nothing past user creation ran the second time
    db = root_client[bootstrap.DB_NAME]
    assert db["purchaseOrders"].count_documents({"status": "SystemTest"}) == 1


def test_application_user_can_read_and_write(mongo, root_client):
    bootstrap.run(root_client)

    host = f"{mongo.get_container_host_ip()}:{mongo.get_exposed_port(27017)}"
    url = connection_url(
        host,
        database=bootstrap.DB_NAME,
        username=bootstrap.APP_USER,
        password=bootstrap.APP_PASSWORD,
        auth_source=bootstrap.DB_NAME,
    )
    app_client = MongoClient(url, serverSelectionTimeoutMS=5000)
    try:
        orders = app_client[bootstrap.DB_NAME]["purchaseOrders"]
        orders.insert_one({"user": "jane@example.com", "status": "OrderPending"})
        assert orders.count_documents({}) == 2

        # readWrite is scoped to ecommerce only
        with pytest.raises(OperationFailure):
            app_client["inventory"]["items"].insert_one({"sku": "X-1"})
    finally:
        app_client.close()
