import asyncio
import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse

from notebuilder.config import settings
from notebuilder.errors import DecodeError, DetectionError, InvalidInputError
from notebuilder.models.chart import ChartResponse, ClassifyRequest
from notebuilder.models.note_event import ClassifierConfig
from notebuilder.services.audio_decoder import LibrosaDecoder
from notebuilder.services.chart_writer import format_chart
from notebuilder.services.direction_classifier import classify
from notebuilder.services.onset_detector import LibrosaOnsetDetector
from notebuilder.services.pipeline import run_pipeline
from notebuilder.storage.file_manager import file_manager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/charts", tags=["charts"])


def _config(amplitude_upper_bound: int | None) -> ClassifierConfig:
    if amplitude_upper_bound is None:
        amplitude_upper_bound = settings.amplitude_upper_bound
    return ClassifierConfig(amplitude_upper_bound=amplitude_upper_bound)


@router.post("/classify", response_model=ChartResponse)
async def classify_onsets(request: ClassifyRequest):
    """Classify an already-detected onset list."""
    try:
        notes = classify(request.onsets, _config(request.amplitude_upper_bound))
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return ChartResponse(notes=notes, text=format_chart(notes))


@router.post("/upload", response_model=ChartResponse)
async def upload_audio(
    file: UploadFile = File(...),
    sensitivity: float | None = Form(None),
    amplitude_upper_bound: int | None = Form(None),
):
    """Build a chart from an uploaded audio file."""
    threshold = settings.activation_threshold if sensitivity is None else sensitivity
    try:
        detector = LibrosaOnsetDetector(
            activation_threshold=threshold,
            hop_length=settings.hop_length,
            window_ms=settings.amplitude_window_ms,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    chart_id = str(uuid.uuid4())
    suffix = Path(file.filename or "").suffix or ".mp3"
    audio_path = file_manager.audio_path(chart_id, suffix)
    audio_path.write_bytes(await file.read())

    try:
        notes = await asyncio.to_thread(
            run_pipeline,
            audio_path,
            file_manager.chart_path(chart_id),
            LibrosaDecoder(settings.sample_rate),
            detector,
            _config(amplitude_upper_bound),
        )
    except (InvalidInputError, DecodeError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except DetectionError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return ChartResponse(id=chart_id, notes=notes, text=format_chart(notes))


@router.get("/{chart_id}")
async def download_chart(chart_id: uuid.UUID):
    """Download a previously built chart."""
    chart_id = str(chart_id)
    if not file_manager.chart_exists(chart_id):
        raise HTTPException(status_code=404, detail="Chart not found")

    return FileResponse(
        file_manager.chart_path(chart_id),
        media_type="text/plain",
        filename=f"chart_{chart_id[:8]}.txt",
    )
