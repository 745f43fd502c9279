# src/taskboard/storage/holidays.py

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import TransportError
from .json_file import read_json, write_json

logger = logging.getLogger(__name__)


class HolidayFile:
    """Read-only holidays.json ({year: {"MM-DD": name}}, no envelope)."""

    def __init__(self, path: str | Path = "holidays.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            write_json(self._path, {})
            logger.info("Initialized empty holidays document at %s", self._path)

    def load_holidays(self) -> dict[str, dict[str, str]]:
        data = read_json(self._path)
        if not isinstance(data, dict):
            raise TransportError(f"{self._path}: expected a JSON object")
        out: dict[str, dict[str, str]] = {}
        for year, days in data.items():
            if isinstance(days, dict):
                out[str(year)] = {str(k): str(v) for k, v in days.items()}
        return out
