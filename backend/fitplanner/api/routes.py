"""FastAPI router for plan media: images, narration, PDF export, quotes.

Mount this router in the main backend app:
    from fitplanner.api.routes import router as planner_router
    app.include_router(planner_router, prefix="/api")
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from pydantic import BaseModel, ValidationError

from fitplanner.llm.providers import Providers
from fitplanner.schemas.media import (
    ImageRequest,
    ImageResult,
    PlanSpeechRequest,
    QuoteResult,
    SpeechRequest,
    SpeechResult,
)
from fitplanner.schemas.plan import FitnessPlan
from fitplanner.services.errors import SpeechSynthesisError
from fitplanner.services.image_gen import ImageGenerator, static_fallback
from fitplanner.services.narration import plan_narration
from fitplanner.services.plan_pdf import PDF_FILENAME, render_plan_pdf
from fitplanner.services.quotes import QuoteService
from fitplanner.services.speech import SpeechSynthesizer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["planner"])


def get_providers(request: Request) -> Providers:
    return request.app.state.providers


async def read_body(request: Request, model: type[BaseModel]):
    """Parse the JSON body inside the handler so each endpoint owns its failure mode.

    Raises:
        ValidationError: invalid JSON or fields of the wrong type.
    """
    return model.model_validate_json(await request.body())


# --- Endpoints ---


@router.post("/generate-image", response_model=ImageResult)
async def generate_image(request: Request, providers: Providers = Depends(get_providers)):
    """Illustration for an exercise or meal; degrades instead of failing."""
    try:
        body = await read_body(request, ImageRequest)
    except ValidationError:
        logger.warning("Unreadable image request body", exc_info=True)
        return static_fallback()

    generator = ImageGenerator(providers.image_model)
    return await generator.generate(body.prompt, body.type)


@router.post("/text-to-speech", response_model=SpeechResult)
async def text_to_speech(request: Request, providers: Providers = Depends(get_providers)):
    try:
        body = await read_body(request, SpeechRequest)
    except ValidationError as e:
        raise SpeechSynthesisError(str(e)) from e

    synthesizer = SpeechSynthesizer(providers.speech_client, providers.settings)
    return await synthesizer.synthesize(body.text, body.voice)


@router.post("/text-to-speech/plan", response_model=SpeechResult)
async def plan_to_speech(request: Request, providers: Providers = Depends(get_providers)):
    """Narrate a whole plan (or one section of it)."""
    try:
        body = await read_body(request, PlanSpeechRequest)
    except ValidationError as e:
        raise SpeechSynthesisError(str(e)) from e

    text = plan_narration(body.plan, body.section)
    synthesizer = SpeechSynthesizer(providers.speech_client, providers.settings)
    return await synthesizer.synthesize(text, body.voice)


@router.post("/export-pdf")
def export_pdf(plan: FitnessPlan):
    # Plain def: fpdf2 rendering is CPU-bound, so FastAPI runs it in the threadpool.
    content = render_plan_pdf(plan)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'},
    )


@router.get("/motivational-quote", response_model=QuoteResult)
async def motivational_quote(providers: Providers = Depends(get_providers)):
    return await QuoteService(providers.text_model).fetch()
