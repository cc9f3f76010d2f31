"""Liveness endpoint."""
from typing import Any, Dict

from fastapi import APIRouter

from textkit import __version__

router = APIRouter()


@router.get("/healthz")
async def healthz() -> Dict[str, Any]:
    """Report the service is up, with its name and version."""
    return {"ok": True, "service": "textkit", "version": __version__}
