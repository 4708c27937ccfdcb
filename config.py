import os

HOST = os.getenv("TODO_HOST", "127.0.0.1")
PORT = int(os.getenv("TODO_PORT", "8000"))
LOG_LEVEL = os.getenv("TODO_LOG_LEVEL", "INFO").upper()

# Comma separated; CORS middleware is only installed when this is set
CORS_ORIGINS = [o.strip() for o in os.getenv("TODO_CORS_ORIGINS", "").split(",") if o.strip()]
