"""CloudWatch metric to Prometheus metric name mapping."""

import re
from types import MappingProxyType

from alert_translator.domain.models import MetricFormat

# Names follow the YACE exporter conventions for the namespaces it ships.
SUPPORTED_METRICS = MappingProxyType(
    {
        "AWS/EC2": MappingProxyType(
            {
                "CPUUtilization": "aws_ec2_cpu_utilization_percent",
                "NetworkIn": "aws_ec2_network_in_bytes",
                "NetworkOut": "aws_ec2_network_out_bytes",
                "DiskReadOps": "aws_ec2_disk_read_ops_total",
                "DiskWriteOps": "aws_ec2_disk_write_ops_total",
            }
        ),
        "AWS/RDS": MappingProxyType(
            {
                "CPUUtilization": "aws_rds_cpu_utilization_percent",
                "DatabaseConnections": "aws_rds_database_connections",
                "FreeableMemory": "aws_rds_freeable_memory_bytes",
                "FreeStorageSpace": "aws_rds_free_storage_space_bytes",
            }
        ),
        "AWS/ELB": MappingProxyType(
            {
                "RequestCount": "aws_elb_request_count_total",
                "Latency": "aws_elb_target_response_time_seconds",
                "HTTPCode_Target_2XX_Count": "aws_elb_http_2xx_requests_total",
                "HTTPCode_Target_4XX_Count": "aws_elb_http_4xx_requests_total",
                "HTTPCode_Target_5XX_Count": "aws_elb_http_5xx_requests_total",
            }
        ),
        "AWS/S3": MappingProxyType(
            {
                "BucketSizeBytes": "aws_s3_bucket_size_bytes",
                "NumberOfObjects": "aws_s3_bucket_number_of_objects",
            }
        ),
    }
)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


def _sanitize(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name).lower()


def to_prometheus_metric(namespace: str, metric_name: str, metric_format: str = MetricFormat.yace.value) -> str:
    """Resolve the Prometheus metric name for a CloudWatch namespace/metric pair."""

    known = SUPPORTED_METRICS.get(namespace, {}).get(metric_name)
    if known:
        return known

    normalized_namespace = _sanitize(str(namespace))
    normalized_metric = _sanitize(str(metric_name))
    if metric_format == MetricFormat.push_metric.value:
        return f"{normalized_namespace}_{normalized_metric}"
    # Drop the first "aws_" so the result carries a single prefix.
    return f"aws_{normalized_namespace.replace('aws_', '', 1)}_{normalized_metric}"


def get_supported_metrics() -> dict[str, dict[str, str]]:
    """Return a mutable snapshot of the built-in metric table."""

    return {namespace: dict(metrics) for namespace, metrics in SUPPORTED_METRICS.items()}
