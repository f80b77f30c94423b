"""Module entry point for the bucket replicator."""
import logging
import os
import sys

from .controller import ReplicationController
from .errors import ReplicatorError

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "BUCKET_REPLICATOR_LOG_LEVEL"


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    configure_logging()
    try:
        ReplicationController().run()
    except ReplicatorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        LOGGER.exception("Unexpected replication error")
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
