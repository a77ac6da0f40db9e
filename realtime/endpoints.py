import json
from typing import Optional

from fastapi import WebSocket, WebSocketDisconnect

import state
from logger import setup_logger
from realtime.utils import broadcast, send_json_safe, snapshot_message

logger = setup_logger(__name__)


def parse_frame(message: dict) -> Optional[dict]:
  """Decode one websocket.receive message into a JSON object, or None."""
  raw = message.get("text")
  if raw is None and message.get("bytes") is not None:
    raw = message["bytes"].decode("utf-8", errors="replace")
  if raw is None:
    return None
  try:
    msg = json.loads(raw)
  except ValueError:
    return None
  return msg if isinstance(msg, dict) else None


def new_participant_id() -> str:
  uid = state.gen_participant_id()
  while uid in state.clients or uid in state.market.state.participants:
    uid = state.gen_participant_id()
  return uid


async def ws_endpoint(ws: WebSocket):
  await ws.accept()
  uid = new_participant_id()
  market = state.market
  market.join(uid)
  logger.info("Connected: %s", uid)

  # init goes to this socket before it can see any broadcast
  await send_json_safe(ws, snapshot_message("init"))
  state.clients[uid] = ws

  try:
    while True:
      message = await ws.receive()
      if message["type"] == "websocket.disconnect":
        break

      msg = parse_frame(message)
      if msg is None:
        logger.warning("Dropped malformed frame from %s", uid)
        continue
      mtype = msg.get("type")

      if mtype == "set_name":
        dirty = market.set_name(uid, msg.get("name"))

      elif mtype == "trade":
        dirty = market.trade(uid, msg.get("asset"), msg.get("side"),
                             msg.get("qty"))

      else:
        # ignore unknown
        continue

      if dirty:
        await broadcast(snapshot_message("market_update"))

  except WebSocketDisconnect:
    pass
  except Exception:
    logger.exception("Connection handler for %s failed", uid)
  finally:
    if state.clients.get(uid) is ws:
      state.clients.pop(uid, None)
    market.leave(uid)
    logger.info("Disconnected: %s", uid)
