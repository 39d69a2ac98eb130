import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# внутренние логгеры python-socketio / engine.io
SOCKETIO_LOGGER = os.getenv("SOCKETIO_LOGGER", "false").lower() in ("1", "true", "yes")


def parse_origins(value: str):
    """'*' или список origin через запятую"""
    value = value.strip()
    if value == "*":
        return "*"
    return [origin.strip() for origin in value.split(",") if origin.strip()]


CORS_ALLOWED_ORIGINS = parse_origins(os.getenv("CORS_ALLOWED_ORIGINS", "*"))
