"""Command-line translation of CloudWatch alarm JSON files."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from alert_translator.domain.models import MetricFormat, TranslationOptions
from alert_translator.services.notifier import Notifier
from alert_translator.services.rendering import render_documents
from alert_translator.services.translator import TranslationError, translate_many


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cw-alert-translate",
        description="Translate CloudWatch alarm JSON into Grafana/Prometheus alert rules.",
    )
    parser.add_argument("source", nargs="?", default="-", help="alarm JSON file, or - for stdin")
    parser.add_argument("--folder", default=None, help="Grafana folder; also names the rule group")
    parser.add_argument(
        "--metric-format",
        choices=[fmt.value for fmt in MetricFormat],
        default=None,
        help="naming scheme for metrics outside the built-in table",
    )
    parser.add_argument("--no-data-state", default=None)
    parser.add_argument("--output", choices=["yaml", "json"], default="yaml")
    return parser


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    notifier = Notifier()

    options = {"folder": args.folder, "noDataState": args.no_data_state}
    if args.metric_format:
        options["metricFormat"] = args.metric_format

    try:
        payload = json.loads(_read_source(args.source))
    except (OSError, json.JSONDecodeError) as exc:
        notifier.notify(f"cannot read alarm JSON: {exc}")
        return 1

    try:
        documents = translate_many(payload, TranslationOptions.model_validate(options))
    except TranslationError as exc:
        notifier.translation_failed(error=str(exc))
        return 1

    for document in documents:
        group = document.groups[0]
        notifier.translation_succeeded(alarm_name=group.rules[0].alert, group=group.name, expr=group.rules[0].expr)

    if args.output == "json":
        print(json.dumps([document.as_dict() for document in documents], indent=2))
    else:
        print(render_documents(documents), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
