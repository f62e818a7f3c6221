"""Method channel API endpoints."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..channels.registry import get_all_channels, get_channel
from ..models.channel import ChannelInfo, MethodCall, ResponseStatus

router = APIRouter(prefix="/channels", tags=["channels"])

_STATUS_CODES = {
    ResponseStatus.SUCCESS: 200,
    ResponseStatus.NOT_IMPLEMENTED: 501,
    ResponseStatus.ERROR: 500,
}


@router.get("", response_model=list[ChannelInfo])
async def list_channels():
    return [channel.info() for channel in get_all_channels().values()]


@router.post("/{channel_name:path}")
async def invoke_method(channel_name: str, call: MethodCall):
    channel = get_channel(channel_name)
    if not channel:
        raise HTTPException(status_code=404, detail="Channel not found")

    response = channel.invoke(call)
    return JSONResponse(
        status_code=_STATUS_CODES[response.status],
        content=response.model_dump(mode="json"),
    )
