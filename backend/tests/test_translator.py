import pytest

from alert_translator.domain.models import TranslationOptions
from alert_translator.services.translator import TranslationError, group_name_for, translate, translate_many


def test_end_to_end_manual_alarm(manual_alarm: dict) -> None:
    document = translate(manual_alarm).as_dict()

    assert len(document["groups"]) == 1
    group = document["groups"][0]
    assert group["name"] == "cloudwatch-alerts"
    assert group["interval"] == "1m"
    assert "folder" not in group
    assert group["rules"] == [
        {
            "alert": "HighCPUUtilization",
            "expr": 'avg_over_time(aws_ec2_cpu_utilization_percent{InstanceId="i-1234567890abcdef0"})',
            "for": "10m",
            "labels": {
                "severity": "warning",
                "source": "cloudwatch",
                "namespace": "AWS/EC2",
                "metric": "CPUUtilization",
                "instanceid": "i-1234567890abcdef0",
            },
            "annotations": {
                "summary": "HighCPUUtilization alert",
                "description": "CloudWatch alarm HighCPUUtilization for CPUUtilization in AWS/EC2",
                "runbook_url": "",
                "dashboard_url": "",
            },
            "threshold": 80,
            "condition": ">",
        }
    ]


def test_threshold_stays_out_of_expression(manual_alarm: dict) -> None:
    rule = translate(manual_alarm).groups[0].rules[0]
    assert ">" not in rule.expr
    assert rule.threshold == 80
    assert rule.condition == ">"


def test_custom_folder_names_group_and_is_attached(manual_alarm: dict) -> None:
    group = translate(manual_alarm, {"folder": "Production Alerts"}).as_dict()["groups"][0]

    assert group["name"] == "production-alerts-alerts"
    assert group["folder"] == "Production Alerts"
    assert "folder" not in group["rules"][0]["labels"]


def test_empty_folder_falls_back_to_default(manual_alarm: dict) -> None:
    group = translate(manual_alarm, TranslationOptions(folder="")).as_dict()["groups"][0]
    assert group["name"] == "cloudwatch-alerts"
    assert "folder" not in group


def test_group_name_collapses_whitespace_runs() -> None:
    assert group_name_for("  Team   Ops\tPaging ") == "-team-ops-paging--alerts"
    assert group_name_for(None) == "cloudwatch-alerts"


def test_exported_and_manual_inputs_translate_identically(load_fixture) -> None:
    exported = translate(load_fixture("cloudwatch_alarm_exported.json")).as_dict()
    manual = translate(load_fixture("cloudwatch_alarm_manual.json")).as_dict()
    assert exported == manual


def test_translation_is_deterministic(manual_alarm: dict) -> None:
    options = {"folder": "Prod", "metricFormat": "push_metric"}
    assert translate(manual_alarm, options).model_dump_json() == translate(manual_alarm, options).model_dump_json()


def test_push_metric_format_for_unknown_metric(manual_alarm: dict) -> None:
    alarm = {**manual_alarm, "namespace": "AWS/Custom", "metricName": "CustomMetric", "dimensions": []}
    rule = translate(alarm, {"metricFormat": "push_metric"}).groups[0].rules[0]
    assert rule.expr == "avg_over_time(aws_custom_custommetric)"


def test_condition_and_threshold_absent_without_operator(manual_alarm: dict) -> None:
    alarm = dict(manual_alarm)
    del alarm["comparisonOperator"]
    rule = translate(alarm).as_dict()["groups"][0]["rules"][0]
    assert "threshold" not in rule
    assert "condition" not in rule


def test_zero_threshold_is_translated(manual_alarm: dict) -> None:
    rule = translate({**manual_alarm, "threshold": 0}).groups[0].rules[0]
    assert rule.threshold == 0
    assert rule.condition == ">"


def test_duplicate_dimension_names_last_write_wins(manual_alarm: dict) -> None:
    alarm = {
        **manual_alarm,
        "dimensions": [{"Name": "Env", "Value": "staging"}, {"Name": "env", "Value": "prod"}],
    }
    rule = translate(alarm).groups[0].rules[0]
    assert rule.labels["env"] == "prod"
    assert rule.expr.endswith('{Env="staging",env="prod"})')


def test_default_metric_format_comes_from_settings(manual_alarm: dict, monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_METRIC_FORMAT", "push_metric")
    alarm = {**manual_alarm, "namespace": "Custom/App", "metricName": "Jobs", "dimensions": []}
    assert translate(alarm).groups[0].rules[0].expr == "avg_over_time(custom_app_jobs)"


def test_severity_interval_and_group_name_ignore_environment(manual_alarm: dict, monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_SEVERITY", "critical")
    monkeypatch.setenv("GROUP_INTERVAL", "5m")
    monkeypatch.setenv("DEFAULT_FOLDER", "AWS Legacy")
    group = translate(manual_alarm).as_dict()["groups"][0]
    assert group["rules"][0]["labels"]["severity"] == "warning"
    assert group["interval"] == "1m"
    assert group["name"] == "cloudwatch-alerts"
    assert "folder" not in group


def test_infinite_period_fails_period_rule(manual_alarm: dict) -> None:
    with pytest.raises(TranslationError, match="^Translation failed: Period must be at least 60 seconds$"):
        translate({**manual_alarm, "period": "inf"})


def test_null_exported_key_is_not_replaced_by_manual_key(manual_alarm: dict) -> None:
    with pytest.raises(TranslationError, match="Missing required field: alarmName"):
        translate({**manual_alarm, "AlarmName": None})


def test_validation_error_is_wrapped(manual_alarm: dict) -> None:
    with pytest.raises(TranslationError, match="^Translation failed: Missing required field: alarmName$"):
        translate({**manual_alarm, "alarmName": ""})


def test_malformed_dimension_is_wrapped(manual_alarm: dict) -> None:
    with pytest.raises(TranslationError, match="Each dimension must have Name and Value properties"):
        translate({**manual_alarm, "dimensions": [{"Key": "InstanceId"}]})


def test_translate_many_accepts_describe_alarms_payload(load_fixture) -> None:
    documents = translate_many(load_fixture("describe_alarms_response.json"))

    rds, sqs = (document.groups[0].rules[0] for document in documents)
    assert rds.expr == 'max_over_time(aws_rds_database_connections{DBInstanceIdentifier="orders-db"})'
    assert rds.for_ == "3m"
    assert rds.condition == ">="
    assert sqs.expr == 'sum_over_time(aws_sqs_approximatenumberofmessagesvisible{QueueName="orders"})'
    assert sqs.for_ == "1h"


def test_translate_many_single_alarm(manual_alarm: dict) -> None:
    assert len(translate_many(manual_alarm)) == 1


def test_translate_many_rejects_scalar_payload() -> None:
    with pytest.raises(TranslationError, match="expected an alarm object"):
        translate_many("HighCPUUtilization")
