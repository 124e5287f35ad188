"""
Event records for sample runs and CLI commands.

Callers use an EventEmitter to collect what happened during one invocation:
  - SAMPLE_START / SAMPLE_COMPLETE around each sample program
  - COMMAND_COMPLETE when a CLI command finishes
  - PROFILE_POINT for each profiled (case, input size)
  - LOG / ERROR for everything else

The CLI prints the collected events as JSON lines when asked to.
"""

import json
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EventType(str, Enum):
    SAMPLE_START = "SAMPLE_START"
    SAMPLE_COMPLETE = "SAMPLE_COMPLETE"
    COMMAND_COMPLETE = "COMMAND_COMPLETE"
    PROFILE_POINT = "PROFILE_POINT"

    # General
    LOG = "LOG"
    ERROR = "ERROR"


@dataclass
class SeqEvent:
    event_type: EventType
    source: str
    message: str
    data: Optional[dict] = None
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type.value,
            "source": self.source,
            "message": self.message,
            "timestamp": self.timestamp,
            "data": self.data,
        }

    def to_json(self) -> str:
        """One-line JSON record."""
        return json.dumps(self.to_dict())


class EventEmitter:
    """
    Collects events during one run.
    Callers use emitter.log() / emitter.complete() / emitter.error().
    Registered callbacks see every event as it is emitted.
    """

    def __init__(self):
        self.events: list[SeqEvent] = []
        self._callbacks: list = []

    def on_event(self, callback):
        """Register a callback for real-time delivery (e.g., printing)."""
        self._callbacks.append(callback)

    def _emit(self, event: SeqEvent):
        self.events.append(event)
        for cb in self._callbacks:
            cb(event)

    def log(self, source: str, message: str, data: dict = None):
        self._emit(SeqEvent(
            event_type=EventType.LOG,
            source=source,
            message=message,
            data=data,
        ))

    def complete(self, event_type: EventType, source: str, message: str,
                 data: dict = None):
        self._emit(SeqEvent(
            event_type=event_type,
            source=source,
            message=message,
            data=data,
        ))

    def error(self, source: str, message: str, data: dict = None):
        self._emit(SeqEvent(
            event_type=EventType.ERROR,
            source=source,
            message=message,
            data=data,
        ))

    def of_type(self, event_type: EventType) -> list[SeqEvent]:
        return [e for e in self.events if e.event_type == event_type]


def emit(source: str, message: str, stream=None) -> None:
    """Print a single JSON log record."""
    print(json.dumps({"source": source, "message": message}), file=stream or sys.stderr)
