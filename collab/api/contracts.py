"""Contract document API routes.

Generates NDA text and offers it as a text or Word download. Nothing here
touches the database; the generated document is handed straight back.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from collab.api.deps import get_app_settings
from collab.api.handlers import require_text
from collab.api.schemas import ErrorResponse, NDARequest, NDAResponse
from collab.core.config import Settings
from collab.core.errors import ValidationError
from collab.strategies.template_engine import NDAData, generate_nda, get_exporter
from collab.strategies.template_engine.exporter import EXPORTERS, safe_basename

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/contracts",
    tags=["contracts"],
    responses={400: {"model": ErrorResponse}},
)

NAMES_REQUIRED = "Brand name and creator name are required"


def _nda_data(payload: NDARequest | None, settings: Settings) -> NDAData:
    payload = payload or NDARequest()
    brand_name = require_text(payload.brand_name, NAMES_REQUIRED)
    creator_name = require_text(payload.creator_name, NAMES_REQUIRED)

    if payload.term is None:
        term = settings.nda_default_term
    else:
        term = require_text(payload.term, "Term must be a non-empty string")

    return NDAData(brand_name=brand_name, creator_name=creator_name, term=term)


@router.post("/nda", response_model=NDAResponse)
async def create_nda(
    payload: NDARequest | None = None,
    settings: Settings = Depends(get_app_settings),
) -> NDAResponse:
    """Generate NDA text for a brand and a creator, dated today."""
    data = _nda_data(payload, settings)
    logger.info(f"Generating NDA: {data.brand_name} / {data.creator_name} ({data.term})")
    return NDAResponse(nda=generate_nda(data))


@router.post("/nda/download")
async def download_nda(
    payload: NDARequest | None = None,
    export_format: str = Query(default="txt", alias="format", description="txt or docx"),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Generate an NDA and return it as a file attachment."""
    data = _nda_data(payload, settings)

    try:
        exporter = get_exporter(export_format)
    except KeyError as e:
        supported = ", ".join(sorted(EXPORTERS))
        raise ValidationError(f"Unsupported format '{export_format}'. Use one of: {supported}") from e

    document = exporter.export(
        generate_nda(data),
        safe_basename("NDA", data.brand_name, data.creator_name),
    )

    logger.info(f"Exported NDA as {document.filename} ({len(document.content)} bytes)")

    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
