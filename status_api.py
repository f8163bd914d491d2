# status_api.py
# Health and version routes, kept separate from the page routes in server.py.
# server.py includes STATUS_ROUTER at import time.
#
# Bodies are fixed literals:
#   /health  -> OK
#   /version -> {"version": "2.0", "color": "green", "features": ["Analytics", "Notifications"]}
#
# Routes are added without a method list so any request method matches.

import json
from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, ConfigDict

STATUS_ROUTER = APIRouter(tags=["status"])

HEALTH_BODY = "OK"


class VersionOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    color: str
    features: List[str]


VERSION_INFO = VersionOut(version="2.0", color="green", features=["Analytics", "Notifications"])

# json.dumps keeps declaration order and the ", " / ": " separators.
VERSION_BODY = json.dumps(VERSION_INFO.model_dump())


def health(request: Request):
    return PlainTextResponse(HEALTH_BODY)


def version(request: Request):
    return Response(content=VERSION_BODY, media_type="application/json")


STATUS_ROUTER.add_route("/health", health)
STATUS_ROUTER.add_route("/version", version)
