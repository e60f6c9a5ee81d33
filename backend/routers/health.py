# backend/routers/health.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/up", response_class=PlainTextResponse)
def up():
    """
    Liveness probe. Never touches the store.
    """
    return "200 OK"
