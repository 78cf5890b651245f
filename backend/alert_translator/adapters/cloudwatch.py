"""CloudWatch alarm adapters."""

from typing import Any

from alert_translator.adapters.interfaces import AlarmSourceAdapter
from alert_translator.domain.models import NormalizedAlarm

# Exported (describe-alarms / console export) key -> canonical key.
FIELD_MAPPING: dict[str, str] = {
    "AlarmName": "alarmName",
    "MetricName": "metricName",
    "Namespace": "namespace",
    "Statistic": "statistic",
    "Period": "period",
    "Threshold": "threshold",
    "ComparisonOperator": "comparisonOperator",
    "EvaluationPeriods": "evaluationPeriods",
    "DatapointsToAlarm": "datapointsToAlarm",
    "Dimensions": "dimensions",
}


class CloudWatchAlarmAdapter(AlarmSourceAdapter):
    """Accept both exported (PascalCase) and manual (camelCase) alarm JSON."""

    def normalize(self, payload: dict[str, Any]) -> NormalizedAlarm:
        normalized: NormalizedAlarm = {}
        for exported_field, canonical_field in FIELD_MAPPING.items():
            # A present exported key wins even when null; validation rejects it later.
            if exported_field in payload:
                normalized[canonical_field] = payload[exported_field]
            elif canonical_field in payload:
                normalized[canonical_field] = payload[canonical_field]

        dimensions = normalized.get("dimensions")
        if isinstance(dimensions, (list, tuple)):
            normalized["dimensions"] = [self._normalize_dimension(dim) for dim in dimensions]
        return normalized

    def _normalize_dimension(self, dim: Any) -> Any:
        if not isinstance(dim, dict):
            return dim
        if dim.get("Name") and dim.get("Value"):
            return dim
        if dim.get("name") and dim.get("value"):
            return {"Name": dim["name"], "Value": dim["value"]}
        # Malformed entries are left for the validator to reject.
        return dim