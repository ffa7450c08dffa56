import asyncio
from fastapi import APIRouter, HTTPException, Request, status
from feltreport.core.config import settings
from feltreport.schemas import ScreenState

router = APIRouter()

@router.get("/screen", response_model=ScreenState)
async def read_screen(request: Request, wait: bool = False):
    """
    Current contents of the felt-report screen.

    With wait=true the response is held until the startup fetch has been
    delivered to the screen.
    """
    presenter = request.app.state.presenter

    if wait:
        try:
            await presenter.wait_until_settled(timeout=settings.SCREEN_WAIT_TIMEOUT)
        except asyncio.TimeoutError:
            raise HTTPException(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                detail="Earthquake data is still being fetched"
            )

    return presenter.to_state()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Did You Feel It?"}
