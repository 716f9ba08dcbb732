"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness probe; the parser has no external dependencies to check."""
    return {"status": "ok"}
