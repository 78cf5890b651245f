"""PromQL expression builder."""

from typing import Any

STATISTIC_FUNCTIONS = {
    "Average": "avg_over_time",
    "Sum": "sum_over_time",
    "Minimum": "min_over_time",
    "Maximum": "max_over_time",
}


def convert_statistic(statistic: str) -> str | None:
    """Map a CloudWatch statistic to a Prometheus range function, if any."""

    return STATISTIC_FUNCTIONS.get(statistic)


def build_query(metric: str, statistic: str, dimensions: list[dict[str, Any]] | None) -> str:
    """Build the rule expression; the threshold is never embedded."""

    query = metric
    if dimensions:
        filters = ",".join(f'{dim["Name"]}="{dim["Value"]}"' for dim in dimensions)
        query += f"{{{filters}}}"

    function = convert_statistic(statistic)
    if function:
        query = f"{function}({query})"
    return query
