"""FastAPI main application."""

import logging
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import structlog

from ..config.config import settings
from ..config.diagram_settings import DiagramSettings
from ..core.diagram import rebuild
from ..core.scale import axis_ticks, compute_scale
from ..core.series import (
    ChartDataStore,
    ClimateDiagramError,
    SeriesKind,
    entries_from_series,
)

# Configure logging
logging.basicConfig(format="%(message)s", level=getattr(logging, settings.log_level.upper(), logging.INFO))

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if settings.log_format == "plain" else structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Climate Diagram API",
    description="Walter-Lieth climate diagram geometry",
    version="0.1.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class DiagramRequest(BaseModel):
    """Request to build a climate diagram.

    Missing (null) monthly values fall back to the built-in sample series.
    """

    temperatures: List[Optional[float]] = Field(
        default_factory=lambda: [None] * 12, description="Monthly mean temperature in °C, January first"
    )
    precipitation: List[Optional[float]] = Field(
        default_factory=lambda: [None] * 12, description="Monthly precipitation in mm, January first"
    )
    location: str = Field("", description="Station name")
    location_height: int = Field(0, description="Station height in metres")
    width: Optional[float] = Field(None, gt=0, description="Chart area width")
    height: Optional[float] = Field(None, gt=0, description="Chart area height")
    draw_full: Optional[bool] = Field(None, description="Draw areas of months without a curve crossing")
    draw_partial: Optional[bool] = Field(None, description="Draw areas of months with a curve crossing")


class ScaleResponse(BaseModel):
    """Value-axis layout of a diagram."""

    num_steps: int
    lowest_step: int
    temperature_labels: List[int]
    precipitation_labels: List[int]
    tick_positions: List[float]


def _build_store(request: DiagramRequest) -> ChartDataStore:
    """Fresh store per request; null entries keep the sample values."""
    store = ChartDataStore(location_name=request.location, location_height=request.location_height)
    store.apply_entries(entries_from_series(SeriesKind.TEMPERATURE, request.temperatures))
    store.apply_entries(entries_from_series(SeriesKind.PRECIPITATION, request.precipitation))
    return store


def _diagram_settings(request: DiagramRequest) -> DiagramSettings:
    return DiagramSettings.from_settings(
        settings,
        width=request.width,
        height=request.height,
        draw_full=request.draw_full,
        draw_partial=request.draw_partial,
    )


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Climate Diagram API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/diagrams/default")
async def get_default_diagram() -> Dict[str, Any]:
    """Diagram of the built-in sample data."""
    diagram = rebuild(ChartDataStore(), DiagramSettings.from_settings(settings))
    return diagram.to_dict()


@app.post("/diagrams")
async def create_diagram(request: DiagramRequest) -> Dict[str, Any]:
    """Build the full geometry of a climate diagram."""
    logger.info("Diagram requested", location=request.location)

    try:
        store = _build_store(request)
        diagram = rebuild(store, _diagram_settings(request))
    except ClimateDiagramError as e:
        logger.warning("Rejected diagram input", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return diagram.to_dict()


@app.post("/diagrams/scale", response_model=ScaleResponse)
async def get_diagram_scale(request: DiagramRequest):
    """Only the value-axis layout for the given data."""
    try:
        store = _build_store(request)
    except ClimateDiagramError as e:
        logger.warning("Rejected diagram input", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    scale = compute_scale(store.temperatures, store.precipitation)
    ticks = axis_ticks(scale, _diagram_settings(request))

    return ScaleResponse(
        num_steps=scale.num_steps,
        lowest_step=scale.lowest_step,
        temperature_labels=[tick.temperature_label for tick in ticks],
        precipitation_labels=[tick.precipitation_label for tick in ticks],
        tick_positions=[tick.y for tick in ticks],
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
