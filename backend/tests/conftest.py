import json
import os
from pathlib import Path

import pytest

os.environ.setdefault("CONSOLE_LOG_ENABLED", "true")

from alert_translator.config import get_settings  # noqa: E402

FIXTURES = Path(__file__).resolve().parents[2] / "fixtures"


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def load_fixture():
    def _load(name: str):
        return json.loads((FIXTURES / name).read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def manual_alarm() -> dict:
    return {
        "alarmName": "HighCPUUtilization",
        "metricName": "CPUUtilization",
        "namespace": "AWS/EC2",
        "statistic": "Average",
        "period": 300,
        "threshold": 80.0,
        "comparisonOperator": "GreaterThanThreshold",
        "evaluationPeriods": 2,
        "datapointsToAlarm": 2,
        "dimensions": [{"Name": "InstanceId", "Value": "i-1234567890abcdef0"}],
    }
