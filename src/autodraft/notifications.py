"""Advisory notices raised while a session runs.

Notices are plain text for the players ("Ana has been eliminated!"), not
errors. Subscribers receive each notice synchronously and every notice is
written to the log.
"""

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
from dataclasses import dataclass
from typing import Callable, List

from autodraft.constants import NOTICE_SUDDEN_DEATH, NOTICE_WARNING
from autodraft.type_hints import NoticeKind
from autodraft.utils import setup_logger

logger = setup_logger(__name__)

_LOG_LEVELS = {
    NOTICE_WARNING: logging.WARNING,
    NOTICE_SUDDEN_DEATH: logging.WARNING,
}


@dataclass(frozen=True)
class Notice:
    """A single advisory message.

    Attributes
    ----------
    kind : str
        Category, e.g. ``"elimination"`` or ``"round_advance"``.
    message : str
        Human-readable text.
    """

    kind: NoticeKind
    message: str


NoticeListener = Callable[[Notice], None]


class Notifier:
    """Publishes notices to subscribers and keeps the session's event log."""

    def __init__(self) -> None:
        self._listeners: List[NoticeListener] = []
        self.notices: List[Notice] = []

    def subscribe(self, listener: NoticeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: NoticeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, kind: NoticeKind, message: str) -> Notice:
        """Record a notice and hand it to every subscriber."""
        notice = Notice(kind=kind, message=message)
        self.notices.append(notice)
        logger.log(_LOG_LEVELS.get(kind, logging.INFO), "[%s] %s", kind, message)
        for listener in list(self._listeners):
            listener(notice)
        return notice

    def clear(self) -> None:
        """Forget the event log, e.g. when a new draft begins."""
        self.notices.clear()

    def messages(self, kind: str = "") -> List[str]:
        """Messages in the log, optionally only those of one kind."""
        return [n.message for n in self.notices if not kind or n.kind == kind]
