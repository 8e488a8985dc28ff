from fastapi import APIRouter
from app.models.ping_models import PingResponse

router = APIRouter()


@router.get("/ping", tags=["Health"], response_model=PingResponse)
async def ping():
    """
    Health check endpoint
    """
    return PingResponse(message="pong")
