"""
Post-initialization checks for the ecommerce database.

Run after the first boot to confirm the application user, the purchase order
indexes and the verification document are in place:

    python -m app.db.verify
"""
import sys
from collections import namedtuple

from app.db.bootstrap import (
    APP_ROLE,
    APP_USER,
    DB_NAME,
    ORDER_INDEXES,
    ORDERS_COLLECTION,
)
from app.db.models import SYSTEM_TEST_STATUS
from app.services.db import get_client
from app.services.logger import get_logger

logger = get_logger("db-verify")

CheckResult = namedtuple("CheckResult", ["name", "ok", "detail"])


def _normalize_key(key):
    # text, hashed and geo indexes carry string directions
    return tuple(
        (field, direction if isinstance(direction, str) else int(direction))
        for field, direction in key
    )


def _sorted_keys(keys):
    return sorted(keys, key=repr)


def check_user(db) -> CheckResult:
    info = db.command("usersInfo", APP_USER)
    users = info.get("users", [])
    if len(users) != 1:
        return CheckResult("user", False, f"expected 1 user '{APP_USER}', found {len(users)}")

    roles = {(r["role"], r["db"]) for r in users[0].get("roles", [])}
    if roles != {(APP_ROLE, DB_NAME)}:
        return CheckResult("user", False, f"unexpected roles for '{APP_USER}': {sorted(roles)}")
    return CheckResult("user", True, f"'{APP_USER}' has {APP_ROLE} on {DB_NAME}")


def check_indexes(db) -> CheckResult:
    info = db[ORDERS_COLLECTION].index_information()
    # compared as multisets so two indexes on the same keys both count
    found = _sorted_keys(_normalize_key(spec["key"]) for name, spec in info.items() if name != "_id_")
    expected = _sorted_keys(_normalize_key(key) for key in ORDER_INDEXES)
    if found != expected:
        return CheckResult(
            "indexes", False, f"expected {expected}, found {found}"
        )
    return CheckResult("indexes", True, f"{len(found)} indexes on {ORDERS_COLLECTION}")


def check_verification_document(db) -> CheckResult:
    query = {"status": SYSTEM_TEST_STATUS, "totalAmount": 0}
    count = db[ORDERS_COLLECTION].count_documents(query)
    if count != 1:
        return CheckResult(
            "verification_document", False, f"expected 1 {SYSTEM_TEST_STATUS} document, found {count}"
        )
    return CheckResult("verification_document", True, f"1 {SYSTEM_TEST_STATUS} document")


def run_checks(db):
    return [
        check_user(db),
        check_indexes(db),
        check_verification_document(db),
    ]


def main():
    client = get_client()
    try:
        results = run_checks(client[DB_NAME])
    finally:
        client.close()

    for r in results:
        print(f"[{'OK' if r.ok else 'FAIL'}] {r.name}: {r.detail}")
        if not r.ok:
            logger.error("verification_failed", extra={"extra": {"check": r.name, "detail": r.detail}})

    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
