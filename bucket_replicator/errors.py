from __future__ import annotations
"""Exceptions raised while replicating buckets."""

from typing import Optional

from .models import BucketPair


class ReplicatorError(RuntimeError):
    """Base class for every fatal replication error."""


class ConfigReadError(ReplicatorError):
    """Raised when the configuration document cannot be read or parsed."""


class ClientInitError(ReplicatorError):
    """Raised when the storage client cannot be constructed."""


class ListObjectsError(ReplicatorError):
    """Raised when a page of a bucket listing cannot be fetched."""

    def __init__(self, bucket: str, cause: Exception | str):
        self.bucket = bucket
        self.cause = cause
        super().__init__(f"unable to list objects in bucket '{bucket}': {cause}")


class CopyObjectError(ReplicatorError):
    """Raised when a server-side copy fails."""

    def __init__(self, ref: str, destination: str, cause: Exception):
        self.ref = ref
        self.destination = destination
        self.cause = cause
        super().__init__(
            f"unable to copy object '{ref}' to bucket '{destination}': {cause}"
        )


class ReplicationAbortedError(ReplicatorError):
    """Terminal error of a run; identifies the pair and phase that failed."""

    ENUMERATE = "enumerate"
    COPY = "copy"

    def __init__(
        self,
        pair_index: int,
        phase: str,
        pair: BucketPair,
        cause: Optional[Exception] = None,
    ):
        self.pair_index = pair_index
        self.phase = phase
        self.pair = pair
        self.cause = cause
        super().__init__(
            f"pair #{pair_index + 1} ({pair.source} -> {pair.destination}) "
            f"failed during {phase}: {cause}"
        )
