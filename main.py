import argparse
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from interfaces.api import register_exception_handlers, router as task_router

# --- Basic Setup ---
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="To-Do List")
app.include_router(task_router)
register_exception_handlers(app)

if config.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS enabled for: {config.CORS_ORIGINS}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="In-memory to-do list")
    parser.add_argument("mode", nargs="?", choices=["serve", "console"], default="serve")
    args = parser.parse_args(argv)

    if args.mode == "console":
        from interfaces.api import store
        from interfaces.console import run_console
        # keep the menu readable
        logging.getLogger().setLevel(max(logging.WARNING, logging.getLogger().level))
        run_console(store)
        return

    import uvicorn
    logger.info(f"Serving on {config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
