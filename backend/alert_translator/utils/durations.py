"""Duration helpers."""


def to_for_duration(evaluation_periods: int, datapoints_to_alarm: int, period: int) -> str:
    """Return the rule `for` duration needed before the alarm can fire.

    Only the smaller of the two period counts matters. Values are truncated to
    the largest whole unit: 5400s becomes "1h", not "1h30m".
    """

    total_seconds = min(evaluation_periods, datapoints_to_alarm) * period
    if total_seconds < 60:
        return f"{total_seconds:g}s"
    if total_seconds < 3600:
        return f"{int(total_seconds // 60)}m"
    return f"{int(total_seconds // 3600)}h"
