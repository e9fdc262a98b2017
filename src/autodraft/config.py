"""Application configuration."""

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

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from autodraft.constants import DEFAULT_DATA_DIR_NAME, ROSTER_FILE_NAME
from autodraft.exceptions import InvalidConfigurationException

ENV_DATA_DIR = "AUTODRAFT_DATA_DIR"
ENV_LOG_LEVEL = "AUTODRAFT_LOG_LEVEL"
ENV_LOG_FILE = "AUTODRAFT_LOG_FILE"
ENV_SEED = "AUTODRAFT_SEED"


@dataclass
class AppConfig:
    """Application settings.

    Attributes
    ----------
    data_dir : Path
        Directory holding the roster file.
    log_level : str
        Name of the root logging level.
    log_file : Path or None
        Optional file receiving a copy of the log.
    seed : int or None
        Seed for reproducible pairings.
    """

    data_dir: Path
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    seed: Optional[int] = None

    @property
    def roster_file(self) -> Path:
        return self.data_dir / ROSTER_FILE_NAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build the configuration from ``AUTODRAFT_*`` environment variables.

        Raises:
            InvalidConfigurationException: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        data_dir = Path(
            env.get(ENV_DATA_DIR) or Path.home() / DEFAULT_DATA_DIR_NAME
        ).expanduser()

        log_level = (env.get(ENV_LOG_LEVEL) or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise InvalidConfigurationException(f"Unknown log level: {log_level}")

        log_file = env.get(ENV_LOG_FILE)

        seed: Optional[int] = None
        raw_seed = env.get(ENV_SEED)
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as e:
                raise InvalidConfigurationException(
                    f"{ENV_SEED} must be an integer: {raw_seed}"
                ) from e

        return cls(
            data_dir=data_dir,
            log_level=log_level,
            log_file=Path(log_file).expanduser() if log_file else None,
            seed=seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "data_dir": str(self.data_dir),
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
            "seed": self.seed,
        }
