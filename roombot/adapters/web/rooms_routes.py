"""Room message relay routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from roombot.adapters.chat.client import ChatClient
from roombot.adapters.log.logger import create_logger
from roombot.config import CONFIG, AppConfig
from roombot.domain.results import ActionResult

rooms_router = APIRouter(prefix="/rooms", tags=["Rooms"])

chat_client = ChatClient(AppConfig.from_env().chat, logger=create_logger(CONFIG["log_level"]))


class MessageRequest(BaseModel):
    text: str = Field(min_length=1)


class MessageResponse(BaseModel):
    success: bool
    message_id: Optional[int] = None
    time: Optional[int] = None
    text: Optional[str] = None


def _to_response(result: ActionResult) -> MessageResponse:
    if result.abandoned:
        raise HTTPException(status_code=409, detail="Superseded by a newer message")
    if not result.success:
        raise HTTPException(
            status_code=502,
            detail={"reason": result.error.reason.value, "message": result.error.message},
        )
    posted = result.value
    return MessageResponse(success=True, message_id=posted.message_id, time=posted.time, text=posted.text)


@rooms_router.post("/{room_id}/messages", response_model=MessageResponse)
async def post_message(room_id: int, req: MessageRequest):
    if not chat_client.is_configured:
        raise HTTPException(status_code=503, detail="Chat fkey not configured")
    if not req.text.strip():
        raise HTTPException(status_code=422, detail="Message text must not be blank")
    result = await chat_client.post_message(chat_client.room(room_id), req.text)
    return _to_response(result)


@rooms_router.post("/{room_id}/messages/{message_id}/edit", response_model=MessageResponse)
async def edit_last_message(room_id: int, message_id: int, req: MessageRequest):
    if not chat_client.is_configured:
        raise HTTPException(status_code=503, detail="Chat fkey not configured")
    if not req.text.strip():
        raise HTTPException(status_code=422, detail="Message text must not be blank")
    last = chat_client.tracker.last_posted(chat_client.room(room_id))
    if last is None or last.message_id != message_id:
        raise HTTPException(status_code=404, detail="Only the room's last posted message can be edited")
    result = await chat_client.edit_message(last, req.text)
    return _to_response(result)
