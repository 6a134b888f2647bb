"""Comparison API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from linecmp.models.api import CompareRequest, CompareResponse
from linecmp.services.config_manager import ConfigManager
from linecmp.services.line_loader import LineLoader
from linecmp.services.result_formatter import ResultFormatter
from linecmp.services.set_engine import SetEngine

router = APIRouter()
line_loader = LineLoader()
set_engine = SetEngine()
result_formatter = ResultFormatter()


@router.post("", response_model=CompareResponse)
async def compare_sources(request: CompareRequest) -> CompareResponse:
    """Compare inline sources and return both the result and the text report"""
    if len(request.sources) < 2:
        raise HTTPException(status_code=400, detail="At least 2 sources are required")

    display = request.display or ConfigManager.get_instance().display_defaults()

    sets = [line_loader.load_text(source.label, source.content) for source in request.sources]
    result = set_engine.compare(sets)

    return CompareResponse(
        result=result,
        report=result_formatter.render(result, display),
    )
