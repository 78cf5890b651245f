"""YAML rendering of alert documents."""

from collections.abc import Iterable

import yaml

from alert_translator.domain.models import AlertDocument


def render_yaml(document: AlertDocument) -> str:
    """Render a document as block-style YAML, keeping rule key order."""

    return yaml.safe_dump(document.as_dict(), sort_keys=False, default_flow_style=False, allow_unicode=True, width=4096)


def render_documents(documents: Iterable[AlertDocument]) -> str:
    """Render several documents as one multi-document YAML stream."""

    return yaml.safe_dump_all(
        [document.as_dict() for document in documents],
        explicit_start=True,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=4096,
    )
