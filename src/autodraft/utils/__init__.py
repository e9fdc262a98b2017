"""Shared helpers: logging setup and id generation."""

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
import uuid
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``.

    Handlers are attached once, on the root logger, by ``configure_logging``.
    """
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> None:
    """Configure the root logger for the application.

    Safe to call more than once; only the first call installs handlers.

    Args:
        level: Logging level name or number
        log_file: Optional file that receives a copy of every record
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed.

    Args:
        prefix: Text placed before the random part, e.g. the class name

    Returns:
        A new id such as ``Player_1f3a9c2e4b70``
    """
    token = uuid.uuid4().hex[:12]
    return f"{prefix}_{token}" if prefix else token
