import logging
import os
import random
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from village import storage
from village.errors import VillageError
from village.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


async def village_error_handler(request: Request, exc: VillageError):
    """Render a rejected game action the way the client displays it.

    JSON requests get ``{"message", "error"}``; everything else a plain-text body.
    """
    if request.headers.get("content-type", "").startswith("application/json"):
        return JSONResponse(
            {"message": exc.message, "error": type(exc).__name__},
            status_code=exc.status_code,
        )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(
    data_dir: Path | None = None,
    presets_dir: Path | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    if presets_dir is None and os.getenv("PRESETS_DIR"):
        presets_dir = Path(os.environ["PRESETS_DIR"])
    storage.init_storage(resolved, presets_dir=presets_dir)

    if rng is None:
        seed = os.getenv("CATCH_SEED")
        rng = random.Random(int(seed)) if seed else random.Random()

    app = FastAPI(title="Critter Village")
    app.state.rng = rng
    app.add_exception_handler(VillageError, village_error_handler)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=os.getenv("CORS_ORIGINS", "http://localhost:3000").split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router, prefix="/api")
    logger.info("app created data_dir=%s", resolved)
    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
