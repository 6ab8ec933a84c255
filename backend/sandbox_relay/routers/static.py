"""
Serves the pre-built front end. Unknown paths fall back to the root document
so client-side routes keep working on reload.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from sandbox_relay.core.config import Settings
from sandbox_relay.dependencies import get_relay_settings

router = APIRouter()

INDEX_DOCUMENT = "index.html"


def resolve_static_path(static_dir: Path, requested: str) -> Path:
    """Existing file under static_dir, or the root document for anything else."""
    root = static_dir.resolve()
    if requested:
        try:
            candidate = (root / requested).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return candidate
        except (OSError, ValueError):
            # e.g. an embedded null byte; not a file we can serve
            pass
    return root / INDEX_DOCUMENT


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_static(full_path: str, settings: Settings = Depends(get_relay_settings)) -> FileResponse:
    path = resolve_static_path(Path(settings.STATIC_DIR), full_path)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path)
