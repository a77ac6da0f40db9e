# api/routes.py
from fastapi import APIRouter

import state

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/snapshot")
async def snapshot():
    """Current market snapshot, same shape as the websocket market_update."""
    return state.market.snapshot()
