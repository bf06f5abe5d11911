from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from enum import Enum
import threading


class Duration(Enum):
    SHORT = timedelta(seconds=2)
    LONG = timedelta(seconds=3.5)


@dataclass(frozen=True, slots=True)
class Notification:
    text: str
    duration: Duration
    shown_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.shown_at + self.duration.value


class NotificationCenter:
    """Holds the most recent transient notification; a new one replaces the old."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest: Notification | None = None

    def show(self, text: str, duration: Duration = Duration.SHORT) -> Notification:
        notification = Notification(text=text, duration=duration, shown_at=datetime.now(UTC))
        with self._lock:
            self._latest = notification
        return notification

    def latest(self) -> Notification | None:
        with self._lock:
            return self._latest

    def latest_text(self) -> str | None:
        latest = self.latest()
        return latest.text if latest is not None else None

    def active(self, now: datetime | None = None) -> Notification | None:
        latest = self.latest()
        if latest is None or latest.is_expired(now or datetime.now(UTC)):
            return None
        return latest

    def clear(self) -> None:
        with self._lock:
            self._latest = None
