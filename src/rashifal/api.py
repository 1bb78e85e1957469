"""JSON API for the daily horoscope, plus the embeddable widget script.

Run with:
    uvicorn rashifal.api:app
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import FileResponse, JSONResponse  # noqa: E402

from rashifal import compute  # noqa: E402
from rashifal.config import Settings  # noqa: E402
from rashifal.models import HoroscopeQuery  # noqa: E402

settings = Settings.from_env()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

_STATIC = Path(__file__).parent / "static"

app = FastAPI(title="rashifal", version="0.1.0")

# The widget is embedded on third-party pages, so reads are open to any origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
    max_age=86400,
)


@app.get("/api/horoscope")
def horoscope(request: Request, tz: str | None = None):
    ip = compute.client_address(
        request.headers.get("x-forwarded-for"),
        request.client.host if request.client else None,
    )
    try:
        result = compute.run(HoroscopeQuery(client_ip=ip, tz=tz), settings=settings)
    except Exception:
        # Full detail stays in the log; callers get a generic message.
        logger.exception("Horoscope API error (ip=%s, tz=%s)", ip, tz)
        return JSONResponse({"error": "Failed to generate horoscope"}, status_code=500)
    return JSONResponse(result.to_dict(), headers={"Cache-Control": settings.cache_control})


@app.get("/embed.js")
def embed_script():
    return FileResponse(_STATIC / "embed.js", media_type="application/javascript")


@app.get("/__health")
def health():
    return {"ok": True}
