"""
FastAPI application for the Moxon frame generator.
Calculates antenna dimensions and serves printable support frames.
"""

import asyncio
import logging
import shutil
import uuid

from fastapi import BackgroundTasks, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from .calculator import MoxonResults, OutputUnit, calculate_moxon
from .config import get_settings
from .frame import compose_frame
from .geometry import build_frame_solid, export_step, export_stl
from .logging_config import setup_logging
from .preview import build_preview_geometry
from .schemas import (
    Dimensions,
    FrameRequest,
    FrameResponse,
    MoxonRequest,
    MoxonResponse,
    PreviewBoxModel,
    PreviewResponse,
)
from .stl import encode_stl, stl_filename

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

settings.outputs_dir.mkdir(parents=True, exist_ok=True)

app = FastAPI(
    title="Moxon Frame API",
    description="Moxon antenna calculator and printable frame generator",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def cleanup_job(job_id: str, delay: int) -> None:
    """Delete job directory after the configured delay."""
    await asyncio.sleep(delay)
    job_dir = settings.outputs_dir / job_id
    shutil.rmtree(job_dir, ignore_errors=True)
    logger.info("Removed job %s", job_id)


def _calculate(request: MoxonRequest) -> MoxonResults:
    results = calculate_moxon(
        request.frequency_mhz,
        request.wire_diameter,
        request.diameter_unit,
        is_insulated=request.is_insulated,
        material=request.material,
    )
    if results is None:
        raise HTTPException(status_code=422, detail="Frequency and wire diameter must be positive")
    return results


@app.post("/calculate", response_model=MoxonResponse)
async def calculate(request: MoxonRequest) -> MoxonResponse:
    """Moxon dimensions in the requested unit."""
    results = _calculate(request)
    return MoxonResponse(
        dimensions=Dimensions.from_converted(results.converted[request.output_unit], request.output_unit),
        velocity_factor=results.velocity_factor,
        warning=results.warning,
    )


@app.post("/generate", response_model=FrameResponse)
async def generate_moxon_frame(
    request: FrameRequest,
    background_tasks: BackgroundTasks
) -> FrameResponse:
    """
    Generate a support frame for the requested antenna.
    Returns URLs to download STL and STEP files.
    """
    results = _calculate(request)
    dims = results.converted[OutputUnit.MILLIMETER]
    cfg = request.print_config(dims.wire_diameter)

    job_id = str(uuid.uuid4())
    job_dir = settings.outputs_dir / job_id
    job_dir.mkdir(parents=True, exist_ok=True)

    frame = compose_frame(dims, cfg)
    triangles = frame.triangles

    stl_name = stl_filename(request.frequency_mhz)
    step_name = stl_name[:-len(".stl")] + ".step"

    export_stl(
        encode_stl(triangles, header=f"Binary STL - Moxon frame {request.frequency_mhz:g} MHz"),
        job_dir / stl_name,
    )
    export_step(build_frame_solid(frame), job_dir / step_name)
    logger.info("Job %s: %d triangles at %g MHz", job_id, len(triangles), request.frequency_mhz)

    if settings.cleanup_delay > 0:
        background_tasks.add_task(cleanup_job, job_id, settings.cleanup_delay)

    return FrameResponse(
        uuid=job_id,
        dimensions=Dimensions.from_converted(dims, OutputUnit.MILLIMETER),
        triangle_count=len(triangles),
        stl_url=f"/outputs/{job_id}/{stl_name}",
        step_url=f"/outputs/{job_id}/{step_name}",
        warning=results.warning,
    )


@app.post("/preview", response_model=PreviewResponse)
async def preview_frame(request: FrameRequest) -> PreviewResponse:
    """Low-detail box geometry for the interactive viewer."""
    results = _calculate(request)
    dims = results.converted[OutputUnit.MILLIMETER]
    boxes = build_preview_geometry(dims, request.print_config(dims.wire_diameter))
    return PreviewResponse(
        dimensions=Dimensions.from_converted(dims, OutputUnit.MILLIMETER),
        boxes=[
            PreviewBoxModel(position=box.position, size=box.size, feature=box.feature)
            for box in boxes
        ],
    )


@app.get("/outputs/{job_id}/{filename}")
async def download_file(job_id: str, filename: str) -> FileResponse:
    """Serve generated output files."""
    outputs_dir = settings.outputs_dir.resolve()
    file_path = (outputs_dir / job_id / filename).resolve()

    if outputs_dir not in file_path.parents or not file_path.is_file():
        raise HTTPException(status_code=404, detail="File not found")

    media_type = "application/octet-stream"
    if filename.endswith(".stl"):
        media_type = "model/stl"
    elif filename.endswith(".step"):
        media_type = "application/step"

    return FileResponse(
        path=file_path,
        media_type=media_type,
        filename=filename,
    )


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}
