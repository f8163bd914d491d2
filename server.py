# server.py
import functools
import logging
import os
import pathlib
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from status_api import STATUS_ROUTER, VERSION_INFO


SERVICE = "static-responder"

BASE_DIR = pathlib.Path(__file__).parent

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
INDEX_PATH = pathlib.Path(os.getenv("INDEX_PATH", str(BASE_DIR / "static" / "index.html")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HTML_TYPE = "text/html; charset=UTF-8"
NOT_FOUND_BODY = "404 Not Found"
INDEX_MISSING_BODY = "index.html not found"

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


setup_logging()

# No docs/openapi routes: only the fixed route table answers.
app = FastAPI(
    title=SERVICE,
    version=VERSION_INFO.version,
    redirect_slashes=False,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.on_event("startup")
def _startup():
    logger.info("Server started at http://%s:%d", HOST, PORT)


# --------------------------
# Static page
# --------------------------
@functools.lru_cache(maxsize=8)
def load_index(path: str) -> Optional[bytes]:
    """Read the page at ``path`` once; ``None`` if it can't be read."""
    # A missing page is cached too: it stays a 500 until restart.
    try:
        return pathlib.Path(path).read_bytes()
    except OSError as e:
        logger.warning("static page unavailable at %s: %s", path, e)
        return None


def index(request: Request):
    content = load_index(str(INDEX_PATH))
    if content is None:
        raise HTTPException(status_code=500, detail=INDEX_MISSING_BODY)
    return Response(content=content, media_type=HTML_TYPE)


# No method list: any method matches.
app.add_route("/", index)
app.add_route("/index.html", index)


# --------------------------
# Health / version
# --------------------------
app.include_router(STATUS_ROUTER)


# --------------------------
# Errors
# --------------------------
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    body = NOT_FOUND_BODY if exc.status_code == 404 else str(exc.detail)
    if exc.status_code >= 500:
        logger.error("%s %s -> %d %s", request.method, request.url.path, exc.status_code, body)
    return PlainTextResponse(body, status_code=exc.status_code, headers=exc.headers)


def main():
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
