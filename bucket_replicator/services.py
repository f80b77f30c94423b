from __future__ import annotations
"""Enumeration and server-side copy of bucket contents."""
from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Callable, Iterable, Iterator, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .errors import CopyObjectError, ListObjectsError
from .models import ObjectPage, qualify
from .profiles import ConnectionProfile, create_client

LOGGER = logging.getLogger(__name__)

ProgressFn = Callable[[int, str], None]

DEFAULT_MAX_WORKERS = 1


class ReplicationService:
    """Wraps the S3 client calls used to replicate a bucket.

    The client is created once, when the service is constructed, and shared by
    every listing and copy.
    """

    def __init__(
        self,
        client_factory: Callable[..., object] | None = None,
        *,
        profile: ConnectionProfile | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self._client_factory = client_factory or create_client
        self._profile = profile or ConnectionProfile()
        self._max_workers = max(int(max_workers), 1)
        self._client = self._client_factory(self._profile)

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def iter_pages(self, bucket: str) -> Iterator[ObjectPage]:
        """Yield the pages of ``bucket`` until the listing is exhausted.

        Raises:
            ListObjectsError: when a page cannot be fetched.
        """
        request_token: str | None = None
        page_number = 1

        while True:
            list_params = {"Bucket": bucket}
            if request_token:
                list_params["ContinuationToken"] = request_token

            try:
                response = self._client.list_objects_v2(**list_params)
            except (ClientError, BotoCoreError) as exc:
                raise ListObjectsError(bucket, exc) from exc

            keys = [obj["Key"] for obj in response.get("Contents", [])]
            truncated = response.get("IsTruncated", False)
            response_token = response.get("NextContinuationToken")
            if truncated and not response_token:
                raise ListObjectsError(
                    bucket, f"page {page_number} is truncated but carries no continuation token"
                )

            yield ObjectPage(
                number=page_number,
                keys=keys,
                next_token=response_token if truncated else None,
            )
            if not truncated:
                return
            request_token = response_token
            page_number += 1

    def list_objects(
        self,
        bucket: str,
        *,
        progress_callback: Optional[ProgressFn] = None,
    ) -> list[str]:
        """Return every object of ``bucket`` as ``bucket/key`` references.

        ``progress_callback`` receives a zero-based counter and the key of each
        listed object.
        """

        refs: list[str] = []
        object_number = 0
        for page in self.iter_pages(bucket):
            LOGGER.debug("Bucket '%s' page %d: %d key(s)", bucket, page.number, len(page.keys))
            for key in page.keys:
                if progress_callback:
                    progress_callback(object_number, key)
                object_number += 1
                refs.append(qualify(bucket, key))
        return refs

    def copy_objects(self, refs: Iterable[str], destination: str) -> int:
        """Copy each ``bucket/key`` reference into ``destination``.

        The full reference is used as the destination key, so copied objects
        keep their source bucket name as a key prefix.

        Raises:
            CopyObjectError: for the first reference, in input order, that failed.
        """

        refs = list(refs)
        if self._max_workers == 1 or len(refs) <= 1:
            for ref in refs:
                self._copy_object(ref, destination)
            return len(refs)

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [executor.submit(self._copy_object, ref, destination) for ref in refs]
            try:
                for future in futures:
                    future.result()
            except BaseException:
                for pending in futures:
                    pending.cancel()
                raise
        return len(refs)

    def _copy_object(self, ref: str, destination: str) -> None:
        try:
            self._client.copy_object(Bucket=destination, CopySource=ref, Key=ref)
        except (ClientError, BotoCoreError) as exc:
            raise CopyObjectError(ref, destination, exc) from exc
        LOGGER.debug("Copied '%s' into bucket '%s'", ref, destination)
