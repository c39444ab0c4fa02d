"""FastAPI application and startup."""

import uvicorn
from fastapi import FastAPI

from roombot.adapters.web.rooms_routes import chat_client, rooms_router
from roombot.config import CONFIG, __version__

app = FastAPI(title="roombot", version=__version__)
app.include_router(rooms_router)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "chat_host": chat_client.config.host,
        "configured": chat_client.is_configured,
        "rooms": [r.room_id for r in chat_client.rooms.rooms()],
    }


def main():
    uvicorn.run(app, host="0.0.0.0", port=CONFIG["port"])
