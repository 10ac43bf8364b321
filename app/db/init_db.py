import os
import sys

from dotenv import load_dotenv

from app.db import bootstrap
from app.services.db import get_client
from app.services.logger import get_logger

logger = get_logger("db-init")


def skip_requested() -> bool:
    return os.getenv("SKIP_DB_INIT", "false").lower() == "true"


def main():
    load_dotenv()

    if skip_requested():
        print("SKIP_DB_INIT is set. Exiting without initializing the database.")
        return 0

    client = None
    try:
        client = get_client()
        bootstrap.run(client)
    except Exception:
        logger.exception("database_initialization_failed")
        raise
    finally:
        if client is not None:
            client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
