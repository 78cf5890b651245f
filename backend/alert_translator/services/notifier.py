"""Console notification sinks."""

import json
import sys
from abc import ABC, abstractmethod

from alert_translator.config import get_settings


class NotificationSink(ABC):
    @abstractmethod
    def send(self, message: str, payload: dict) -> None:
        raise NotImplementedError


class ConsoleSink(NotificationSink):
    """Write to stderr so CLI output on stdout stays valid YAML/JSON."""

    def send(self, message: str, payload: dict) -> None:
        suffix = f" {json.dumps(payload, sort_keys=True)}" if payload else ""
        print(f"[CWT] {message}{suffix}", file=sys.stderr)


class Notifier:
    """Fan translation events out to the configured sinks."""

    def __init__(self) -> None:
        self.settings = get_settings()
        self.sinks: list[NotificationSink] = []
        if self.settings.console_log_enabled:
            self.sinks.append(ConsoleSink())

    def notify(self, message: str, payload: dict | None = None) -> None:
        for sink in self.sinks:
            sink.send(message, payload or {})

    def translation_succeeded(self, *, alarm_name: str, group: str, expr: str) -> None:
        self.notify(f"translated alarm={alarm_name} group={group}", {"expr": expr})

    def translation_failed(self, *, error: str) -> None:
        self.notify(error)
