"""FastAPI routes."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Response

from alert_translator.domain.models import (
    BatchTranslateRequest,
    BatchTranslateResponse,
    DimensionsParseRequest,
    DimensionsParseResponse,
    TranslateRequest,
)
from alert_translator.services.dimensions import InvalidDimensionsError, parse_dimensions
from alert_translator.services.metric_mapper import get_supported_metrics
from alert_translator.services.notifier import Notifier
from alert_translator.services.rendering import render_documents, render_yaml
from alert_translator.services.translator import TranslationError, translate, translate_many

router = APIRouter(prefix="/v1")

YAML_MEDIA_TYPE = "application/x-yaml"


@router.post("/translate")
def post_translate(payload: TranslateRequest, output: Literal["json", "yaml"] = "json"):
    notifier = Notifier()
    try:
        document = translate(payload.alarm, payload.options)
    except TranslationError as exc:
        notifier.translation_failed(error=str(exc))
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    group = document.groups[0]
    notifier.translation_succeeded(alarm_name=group.rules[0].alert, group=group.name, expr=group.rules[0].expr)
    if output == "yaml":
        return Response(content=render_yaml(document), media_type=YAML_MEDIA_TYPE)
    return document.as_dict()


@router.post("/translate/batch")
def post_translate_batch(payload: BatchTranslateRequest, output: Literal["json", "yaml"] = "json"):
    notifier = Notifier()
    try:
        documents = translate_many(payload.alarms, payload.options)
    except TranslationError as exc:
        notifier.translation_failed(error=str(exc))
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    notifier.notify(f"translated batch count={len(documents)}")
    if output == "yaml":
        return Response(content=render_documents(documents), media_type=YAML_MEDIA_TYPE)
    return BatchTranslateResponse(documents=[document.as_dict() for document in documents])


@router.get("/metrics")
def list_supported_metrics() -> dict[str, dict[str, str]]:
    return get_supported_metrics()


@router.post("/dimensions/parse", response_model=DimensionsParseResponse)
def post_parse_dimensions(payload: DimensionsParseRequest):
    try:
        dimensions = parse_dimensions(payload.text)
    except InvalidDimensionsError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return DimensionsParseResponse(dimensions=dimensions)
