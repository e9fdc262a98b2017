"""Key-value storage backends for the roster document."""

# Auto Draft
# Copyright (C) 2025  Auto Draft developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from autodraft.exceptions import RosterLoadException, RosterSaveException
from autodraft.utils import setup_logger

logger = setup_logger(__name__)


class KeyValueStore(ABC):
    """Durable string records addressed by key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the record stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous record."""


class MemoryKeyValueStore(KeyValueStore):
    """Keeps records in a dictionary; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore(KeyValueStore):
    """Keeps all records in one JSON object on disk.

    The file holds ``{key: value}`` where each value is the record string.
    A missing file behaves as an empty store.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.exception("Error reading %s", self.path)
            raise RosterLoadException(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise RosterLoadException(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except OSError as e:
            logger.exception("Error writing %s", self.path)
            raise RosterSaveException(f"Could not save {self.path}: {e}") from e
        logger.debug("Saved record %s to %s", key, self.path)
