from fastapi import WebSocket

import state
from logger import setup_logger

logger = setup_logger(__name__)


async def send_json_safe(ws: WebSocket, payload: dict) -> bool:
  try:
    await ws.send_json(payload)
  except Exception as exc:  # closed socket, reset transport, ...
    logger.debug("send failed: %s", exc)
    return False
  return True


async def broadcast(payload: dict):
  """Send the same payload to every registered connection."""
  for uid, ws in list(state.clients.items()):
    if not await send_json_safe(ws, payload):
      if state.clients.get(uid) is ws:
        state.clients.pop(uid, None)


def snapshot_message(msg_type: str) -> dict:
  return {"type": msg_type, **state.market.snapshot()}
