# src/taskboard/storage/json_file.py

from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..errors import TransportError

logger = logging.getLogger(__name__)

JsonRecord = dict[str, Any]


class JsonDocument:
    """
    One JSON document on disk holding a list of records under an envelope key:

        {"tasks": [ {...}, {...} ]}

    Every read parses the whole file and every write overwrites it
    (temp file + os.replace). There is no locking: two processes writing the
    same document race and the later write wins.
    """

    def __init__(self, path: str | Path, envelope_key: str) -> None:
        self._path = Path(path)
        self._key = envelope_key
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self.write_records([])
            logger.info("Initialized empty %s document at %s", self._key, self._path)

    @property
    def path(self) -> Path:
        return self._path

    def read_records(self) -> list[JsonRecord]:
        data = read_json(self._path)
        if not isinstance(data, dict):
            raise TransportError(f"{self._path}: expected an object with '{self._key}'")
        items = data.get(self._key, [])
        if not isinstance(items, list):
            raise TransportError(f"{self._path}: '{self._key}' is not a list")
        bad = [i for i, item in enumerate(items) if not isinstance(item, dict)]
        if bad:
            # Every entry must survive the next read-modify-write.
            raise TransportError(f"{self._path}: non-object entries in '{self._key}' at {bad}")
        return [dict(item) for item in items]

    def write_records(self, records: Iterable[JsonRecord]) -> None:
        write_json(self._path, {self._key: list(records)})


def read_json(path: Path) -> Any:
    try:
        raw = path.read_text("utf-8")
    except OSError as ex:
        raise TransportError(f"Failed to read {path}: {ex}") from ex
    try:
        return json.loads(raw)
    except json.JSONDecodeError as ex:
        raise TransportError(f"Malformed JSON in {path}: {ex}") from ex


def write_json(path: Path, data: Any) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)
    except OSError as ex:
        raise TransportError(f"Failed to write {path}: {ex}") from ex


def new_record_id(existing: Iterable[str]) -> str:
    """Millisecond-timestamp id, bumped until it does not collide with existing ids."""
    taken = set(existing)
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)
