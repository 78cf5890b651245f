"""Alarm validation rules."""

from alert_translator.domain.models import NormalizedAlarm
from alert_translator.utils.numbers import as_number

REQUIRED_FIELDS = ("alarmName", "metricName", "namespace", "statistic", "threshold")


class ValidationError(ValueError):
    """Raised when a normalized alarm violates a translation precondition."""


def validate_alarm(alarm: NormalizedAlarm) -> None:
    """Check the normalized alarm, raising on the first violated rule."""

    for field in REQUIRED_FIELDS:
        value = alarm.get(field)
        if value is None or str(value).strip() == "":
            raise ValidationError(f"Missing required field: {field}")

    # Zero passes despite the wording of the message.
    threshold = as_number(alarm.get("threshold"))
    if threshold is None or threshold < 0:
        raise ValidationError("Threshold must be a positive number")

    period = as_number(alarm.get("period"))
    if period is None or period < 60:
        raise ValidationError("Period must be at least 60 seconds")

    evaluation_periods = as_number(alarm.get("evaluationPeriods"))
    datapoints_to_alarm = as_number(alarm.get("datapointsToAlarm"))
    if (
        evaluation_periods is None
        or datapoints_to_alarm is None
        or evaluation_periods < 1
        or datapoints_to_alarm < 1
    ):
        raise ValidationError("Evaluation periods and datapoints to alarm must be at least 1")

    if datapoints_to_alarm > evaluation_periods:
        raise ValidationError("Datapoints to alarm cannot be greater than evaluation periods")

    _validate_dimensions(alarm.get("dimensions"))


def _validate_dimensions(dimensions) -> None:
    if dimensions is None:
        return
    if not isinstance(dimensions, (list, tuple)):
        raise ValidationError("Dimensions must be an array")
    for dim in dimensions:
        if not isinstance(dim, dict) or not dim.get("Name") or dim.get("Value") is None:
            raise ValidationError("Each dimension must have Name and Value properties")
