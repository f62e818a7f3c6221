"""WebSocket transport for method channels."""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from ..channels.registry import get_channel
from ..models.channel import ChannelFrame, MethodCall, MethodResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["websocket"])


def dispatch_frame(msg: dict) -> dict:
    """Route one decoded frame to its channel and build the reply frame."""
    try:
        frame = ChannelFrame.model_validate(msg)
    except ValidationError as e:
        response = MethodResponse.failure(
            "invalid_frame", "Malformed method call", e.errors(include_url=False, include_context=False),
        )
        return {"id": msg.get("id"), **response.model_dump(mode="json")}

    channel = get_channel(frame.channel)
    if not channel:
        response = MethodResponse.failure(
            "channel_not_found", f"No channel named {frame.channel}",
        )
    else:
        response = channel.invoke(MethodCall(method=frame.method, arguments=frame.arguments))
    return {"id": frame.id, **response.model_dump(mode="json")}


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()

    try:
        while True:
            data = await ws.receive_text()
            try:
                msg = json.loads(data)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            await ws.send_json(dispatch_frame(msg))

    except WebSocketDisconnect:
        logger.debug("WebSocket client disconnected")
