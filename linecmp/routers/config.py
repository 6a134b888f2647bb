"""Configuration API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from linecmp.models.api import DisplayDefaults, DisplayDefaultsUpdate
from linecmp.services.config_manager import ConfigManager

router = APIRouter()


@router.get("", response_model=DisplayDefaults)
async def get_config() -> DisplayDefaults:
    """Get current display defaults"""
    display = ConfigManager.get_instance().display_defaults()
    return DisplayDefaults(max_lines=display.max_lines, show_full=display.show_full)


@router.put("", response_model=DisplayDefaults)
async def update_config(request: DisplayDefaultsUpdate) -> DisplayDefaults:
    """Update display defaults"""
    config_manager = ConfigManager.get_instance()
    display = config_manager.get_config().get("display", {})

    # Update only provided fields
    if request.max_lines is not None:
        display["max_lines"] = request.max_lines
    if request.show_full is not None:
        display["show_full"] = request.show_full

    try:
        config_manager.save_config({"display": display})
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    updated = config_manager.display_defaults()
    return DisplayDefaults(max_lines=updated.max_lines, show_full=updated.show_full)
