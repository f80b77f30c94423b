from __future__ import annotations
"""Data models describing replication work and its results."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class BucketPair:
    """A configured source bucket and the bucket it is copied into."""

    source: str
    destination: str


@dataclass
class ObjectPage:
    """Represents a single page returned by the list endpoint."""

    number: int
    keys: list[str] = field(default_factory=list)
    next_token: Optional[str] = None


@dataclass
class PairResult:
    """Outcome of a fully replicated bucket pair."""

    pair: BucketPair
    copied: int = 0


@dataclass
class ReplicationReport:
    results: list[PairResult] = field(default_factory=list)

    @property
    def total_copied(self) -> int:
        return sum(result.copied for result in self.results)


def qualify(bucket: str, key: str) -> str:
    """Return the ``bucket/key`` reference understood as a copy source."""

    return f"{bucket}/{key}"
