"""Alarm normalization service."""

from alert_translator.adapters.cloudwatch import CloudWatchAlarmAdapter
from alert_translator.domain.models import NormalizedAlarm


def normalize_alarm(payload: dict) -> NormalizedAlarm:
    """Normalize exported or manual CloudWatch alarm JSON into the canonical record."""

    return CloudWatchAlarmAdapter().normalize(payload)
