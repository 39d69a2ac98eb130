import logging
from pathlib import Path

import socketio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from crud.user import UserRepository
from routers import status
from sockets.handlers import register_socketio_handlers
from utils import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

INDEX_HTML = Path(__file__).resolve().parent / "index.html"


def create_app(users: UserRepository = None):
    """FastAPI + Socket.IO, обёрнутые в один ASGI app."""
    if users is None:
        users = UserRepository()

    app = FastAPI(title="Room Chat")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.CORS_ALLOWED_ORIGINS == "*" else settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.users = users

    @app.get("/")
    async def index():
        return FileResponse(INDEX_HTML)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(status.router, prefix="/status", tags=["status"])

    # инициализация Socket.IO сервера
    sio = socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=settings.CORS_ALLOWED_ORIGINS,
        logger=settings.SOCKETIO_LOGGER,
        engineio_logger=settings.SOCKETIO_LOGGER
    )
    app.state.sio = sio
    register_socketio_handlers(sio, users)

    # обёртка FastAPI приложения в Socket.IO
    return socketio.ASGIApp(sio, app)


app_with_socketio = create_app()


if __name__ == "__main__":
    logger.info(f"Socket.IO server running at http://localhost:{settings.PORT}/")
    uvicorn.run(app_with_socketio, host=settings.HOST, port=settings.PORT)
