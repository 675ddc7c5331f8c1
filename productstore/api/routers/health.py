# productstore/api/routers/health.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from productstore.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def root():
    return "Hello World! 🥳"


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok", service="product-service")
