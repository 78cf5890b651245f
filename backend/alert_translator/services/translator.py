"""CloudWatch alarm to Grafana/Prometheus rule translation."""

import re
from collections.abc import Mapping
from typing import Any

from alert_translator.domain.models import (
    AlertDocument,
    AlertGroup,
    AlertRule,
    NormalizedAlarm,
    TranslationOptions,
)
from alert_translator.services.metric_mapper import to_prometheus_metric
from alert_translator.services.normalization import normalize_alarm
from alert_translator.services.query_builder import build_query
from alert_translator.services.validation import validate_alarm
from alert_translator.utils.durations import to_for_duration
from alert_translator.utils.numbers import as_number

RULE_SEVERITY = "warning"
GROUP_INTERVAL = "1m"
DEFAULT_FOLDER = "cloudwatch"

COMPARISON_OPERATORS = {
    "GreaterThanThreshold": ">",
    "GreaterThanOrEqualToThreshold": ">=",
    "LessThanThreshold": "<",
    "LessThanOrEqualToThreshold": "<=",
}


class TranslationError(ValueError):
    """Raised when an alarm cannot be translated."""


def convert_comparison_operator(operator: str) -> str:
    """Map a CloudWatch comparison operator; unknown operators fall back to ">"."""

    return COMPARISON_OPERATORS.get(operator, ">")


def build_labels(alarm: NormalizedAlarm) -> dict[str, str]:
    labels = {
        "severity": RULE_SEVERITY,
        "source": "cloudwatch",
        "namespace": str(alarm["namespace"]),
        "metric": str(alarm["metricName"]),
    }
    for dim in alarm.get("dimensions") or []:
        labels[str(dim["Name"]).lower()] = str(dim["Value"])
    return labels


def build_annotations(alarm: NormalizedAlarm) -> dict[str, str]:
    name = alarm["alarmName"]
    return {
        "summary": f"{name} alert",
        "description": f"CloudWatch alarm {name} for {alarm['metricName']} in {alarm['namespace']}",
        "runbook_url": "",
        "dashboard_url": "",
    }


def group_name_for(folder: str | None) -> str:
    """Group name derived from the folder, e.g. "Production Alerts" -> "production-alerts-alerts"."""

    folder = folder or DEFAULT_FOLDER
    slug = re.sub(r"\s+", "-", folder.lower())
    return f"{slug}-alerts"


def build_rule(alarm: NormalizedAlarm, options: TranslationOptions) -> AlertRule:
    metric = to_prometheus_metric(alarm["namespace"], alarm["metricName"], options.metric_format)
    rule = AlertRule(
        alert=str(alarm["alarmName"]),
        expr=build_query(metric, alarm["statistic"], alarm.get("dimensions")),
        for_=to_for_duration(
            as_number(alarm["evaluationPeriods"]),
            as_number(alarm["datapointsToAlarm"]),
            as_number(alarm["period"]),
        ),
        labels=build_labels(alarm),
        annotations=build_annotations(alarm),
    )
    if alarm.get("threshold") is not None and alarm.get("comparisonOperator"):
        rule.threshold = as_number(alarm["threshold"])
        rule.condition = convert_comparison_operator(alarm["comparisonOperator"])
    return rule


def assemble(alarm: NormalizedAlarm, options: TranslationOptions) -> AlertDocument:
    """Wrap the translated rule in its single rule group."""

    group = AlertGroup(
        name=group_name_for(options.folder),
        interval=GROUP_INTERVAL,
        rules=[build_rule(alarm, options)],
    )
    if options.folder:
        group.folder = options.folder
    return AlertDocument(groups=[group])


def _coerce_options(options: TranslationOptions | Mapping[str, Any] | None) -> TranslationOptions:
    if options is None:
        return TranslationOptions()
    if isinstance(options, TranslationOptions):
        return options
    return TranslationOptions.model_validate(dict(options))


def translate(
    alarm: Mapping[str, Any],
    options: TranslationOptions | Mapping[str, Any] | None = None,
) -> AlertDocument:
    """Translate one CloudWatch alarm into a one-group, one-rule alert document."""

    try:
        resolved = _coerce_options(options)
        normalized = normalize_alarm(dict(alarm))
        validate_alarm(normalized)
        return assemble(normalized, resolved)
    except Exception as exc:  # noqa: BLE001
        raise TranslationError(f"Translation failed: {exc}") from exc


def translate_many(
    payload: Mapping[str, Any] | list[Mapping[str, Any]],
    options: TranslationOptions | Mapping[str, Any] | None = None,
) -> list[AlertDocument]:
    """Translate a describe-alarms payload, a list of alarms, or a single alarm."""

    if isinstance(payload, Mapping) and "MetricAlarms" in payload:
        alarms = payload["MetricAlarms"] or []
    elif isinstance(payload, Mapping):
        alarms = [payload]
    elif isinstance(payload, list):
        alarms = payload
    else:
        raise TranslationError("Translation failed: expected an alarm object, a list of alarms or a MetricAlarms payload")
    return [translate(alarm, options) for alarm in alarms]
