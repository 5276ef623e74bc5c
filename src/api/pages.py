"""Serve the overlay and admin pages straight from disk."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from config.settings import Settings, get_settings

router = APIRouter(tags=["pages"])


def _page(settings: Settings, filename: str) -> FileResponse:
    path = settings.static_dir / filename
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path, media_type="text/html")


@router.get("/")
async def overlay_page(settings: Settings = Depends(get_settings)) -> FileResponse:
    return _page(settings, "overlay.html")


@router.get("/admin")
async def admin_page(settings: Settings = Depends(get_settings)) -> FileResponse:
    return _page(settings, "admin.html")
