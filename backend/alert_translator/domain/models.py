"""Domain schemas and enums."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from alert_translator.config import get_settings

# Canonical alarm record produced by the normalizer. Only canonical camelCase
# keys are present; a key is missing when the source alarm did not supply it.
NormalizedAlarm = dict[str, Any]


class MetricFormat(str, Enum):
    """Prometheus naming scheme for metrics outside the built-in table."""

    yace = "yace"
    push_metric = "push_metric"


class Dimension(BaseModel):
    """Name/Value pair; values keep the JSON type they were parsed with."""

    Name: Any
    Value: Any


class TranslationOptions(BaseModel):
    """Caller-supplied translation options."""

    model_config = ConfigDict(populate_by_name=True)

    folder: str | None = None
    no_data_state: str | None = Field(default=None, alias="noDataState")
    metric_format: str = Field(default_factory=lambda: get_settings().default_metric_format, alias="metricFormat")


class AlertRule(BaseModel):
    """Prometheus-style alerting rule."""

    model_config = ConfigDict(populate_by_name=True)

    alert: str
    expr: str
    for_: str = Field(alias="for")
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    threshold: int | float | None = None
    condition: str | None = None


class AlertGroup(BaseModel):
    name: str
    interval: str = "1m"
    rules: list[AlertRule]
    folder: str | None = None


class AlertDocument(BaseModel):
    """Rule document holding exactly one group per translated alarm."""

    groups: list[AlertGroup]

    def as_dict(self) -> dict[str, Any]:
        """Plain mapping with the `for` key and without unset optional fields."""

        return self.model_dump(by_alias=True, exclude_none=True)


class TranslateRequest(BaseModel):
    alarm: dict[str, Any]
    options: TranslationOptions = Field(default_factory=TranslationOptions)


class BatchTranslateRequest(BaseModel):
    alarms: list[dict[str, Any]] | dict[str, Any]
    options: TranslationOptions = Field(default_factory=TranslationOptions)


class BatchTranslateResponse(BaseModel):
    documents: list[dict[str, Any]]


class DimensionsParseRequest(BaseModel):
    text: str = ""


class DimensionsParseResponse(BaseModel):
    dimensions: list[Dimension]
