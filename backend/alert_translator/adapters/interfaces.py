"""Adapter interface contracts."""

from abc import ABC, abstractmethod
from typing import Any

from alert_translator.domain.models import NormalizedAlarm


class AlarmSourceAdapter(ABC):
    """Normalize external alarm definitions into the canonical record."""

    @abstractmethod
    def normalize(self, payload: dict[str, Any]) -> NormalizedAlarm:
        raise NotImplementedError
