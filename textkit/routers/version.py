"""Version endpoint."""
import importlib.metadata
import subprocess
import sys
from typing import Any, Dict

from fastapi import APIRouter

from textkit import __version__

router = APIRouter()

REPORTED_DEPENDENCIES = ("fastapi", "uvicorn", "pydantic", "pydantic-settings")


def get_git_sha() -> str:
    """Get git SHA if available."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            timeout=2,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    if result.returncode == 0:
        return result.stdout.strip()
    return "unknown"


@router.get("/version")
async def version() -> Dict[str, Any]:
    """Get version and build info."""
    deps = {}
    for name in REPORTED_DEPENDENCIES:
        try:
            deps[name] = importlib.metadata.version(name)
        except importlib.metadata.PackageNotFoundError:
            deps[name] = None

    return {
        "service": "textkit",
        "version": __version__,
        "git_sha": get_git_sha(),
        "python_version": sys.version,
        "dependencies": deps,
    }
