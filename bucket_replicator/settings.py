from __future__ import annotations
"""Loading of the replication configuration document."""

from dataclasses import dataclass, field
import logging
from pathlib import Path

import yaml

from .errors import ConfigReadError
from .models import BucketPair

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")


@dataclass
class ReplicationConfig:
    """Bucket pairs to replicate, in declared order, plus run options."""

    locations: list[BucketPair] = field(default_factory=list)
    max_workers: int = 1


class ConfigStorage:
    """YAML-backed source of :class:`ReplicationConfig`.

    The document looks like::

        locations:
          - source: bucket-a
            dest: bucket-b
        max_workers: 4   # optional
    """

    def __init__(self, config_path: str | Path | None = None):
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        self._path = Path(config_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ReplicationConfig:
        """Parse the configuration document.

        Raises:
            ConfigReadError: when the file is missing, unreadable or malformed.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigReadError(
                f"unable to read configuration file '{self._path}': {exc}"
            ) from exc
        try:
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise ConfigReadError(
                f"unable to parse configuration file '{self._path}': {exc}"
            ) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigReadError(
                f"configuration file '{self._path}' must contain a mapping"
            )

        config = ReplicationConfig(
            locations=self._parse_locations(data.get("locations")),
            max_workers=self._parse_max_workers(data.get("max_workers")),
        )
        LOGGER.debug(
            "Loaded %d location(s) from '%s' (max_workers=%d)",
            len(config.locations),
            self._path,
            config.max_workers,
        )
        return config

    def _parse_locations(self, raw) -> list[BucketPair]:
        if raw is None or raw == "":
            return []
        if not isinstance(raw, list):
            raise ConfigReadError(
                f"'locations' in '{self._path}' must be a list of source/dest entries"
            )

        pairs: list[BucketPair] = []
        for index, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise ConfigReadError(
                    f"location #{index + 1} in '{self._path}' must be a mapping"
                )
            source = entry.get("source")
            dest = entry.get("dest")
            for name, value in (("source", source), ("dest", dest)):
                if not isinstance(value, str) or not value:
                    raise ConfigReadError(
                        f"location #{index + 1} in '{self._path}' needs a non-empty '{name}'"
                    )
            pairs.append(BucketPair(source=source, destination=dest))
        return pairs

    def _parse_max_workers(self, raw) -> int:
        if raw is None or raw == "":
            return ReplicationConfig.max_workers
        try:
            value = int(raw)
        except (TypeError, ValueError):
            LOGGER.warning("Ignoring invalid max_workers value %r", raw)
            return ReplicationConfig.max_workers
        if value <= 0:
            LOGGER.warning("Ignoring non-positive max_workers value %r", raw)
            return ReplicationConfig.max_workers
        return value
