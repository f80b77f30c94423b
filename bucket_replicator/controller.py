from __future__ import annotations
"""Drives replication over the configured bucket pairs."""

import logging
import sys

from .errors import CopyObjectError, ListObjectsError, ReplicationAbortedError
from .models import BucketPair, PairResult, ReplicationReport
from .services import ProgressFn, ReplicationService
from .settings import ConfigStorage, ReplicationConfig

LOGGER = logging.getLogger(__name__)


def print_progress(number: int, key: str) -> None:
    print(f"Object {number}: {key}", file=sys.stdout, flush=True)


class ReplicationController:
    """Copies every configured source bucket into its destination, in order."""

    def __init__(
        self,
        service: ReplicationService | None = None,
        storage: ConfigStorage | None = None,
        progress: ProgressFn | None = None,
    ):
        self._storage = storage or ConfigStorage()
        self._config: ReplicationConfig = self._storage.load()
        self._service = service or ReplicationService(max_workers=self._config.max_workers)
        self._progress = progress or print_progress

    @property
    def locations(self) -> list[BucketPair]:
        return list(self._config.locations)

    def run(self) -> ReplicationReport:
        """Replicate each pair; stop at the first failure.

        Raises:
            ReplicationAbortedError: naming the pair index and phase that failed.
        """
        report = ReplicationReport()
        for index, pair in enumerate(self._config.locations):
            report.results.append(self._replicate_pair(index, pair))
        LOGGER.info(
            "Replicated %d pair(s), %d object(s) copied",
            len(report.results),
            report.total_copied,
        )
        return report

    def _replicate_pair(self, index: int, pair: BucketPair) -> PairResult:
        LOGGER.info("Replicating '%s' into '%s'", pair.source, pair.destination)
        try:
            refs = self._service.list_objects(pair.source, progress_callback=self._progress)
        except ListObjectsError as exc:
            LOGGER.debug("Listing '%s' failed: %s", pair.source, exc)
            raise ReplicationAbortedError(
                index, ReplicationAbortedError.ENUMERATE, pair, exc
            ) from exc

        try:
            copied = self._service.copy_objects(refs, pair.destination)
        except CopyObjectError as exc:
            LOGGER.debug("Copying into '%s' failed: %s", pair.destination, exc)
            raise ReplicationAbortedError(
                index, ReplicationAbortedError.COPY, pair, exc
            ) from exc

        LOGGER.info("Copied %d object(s) from '%s' into '%s'", copied, pair.source, pair.destination)
        return PairResult(pair=pair, copied=copied)
