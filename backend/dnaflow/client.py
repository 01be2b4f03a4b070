"""Serving a prebuilt browser client next to the API."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ClientFiles(StaticFiles):
    """Static files that answer unknown client routes with ``index.html``."""

    # purpose: let deep links such as /workflows/1 reach the single-page client router
    # status: active
    async def get_response(self, path: str, scope):
        try:
            response = await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404 or _is_api_path(path):
                raise
            return await super().get_response("index.html", scope)
        if response.status_code == 404 and not _is_api_path(path):
            return await super().get_response("index.html", scope)
        return response


def _is_api_path(path: str) -> bool:
    # unknown API urls stay 404 instead of returning the client shell
    return path == "api" or path.startswith("api/")


def mount_client(app: FastAPI, directory: str) -> None:
    """Mount the client bundle at ``/``; call after every API router is included."""

    app.mount("/", ClientFiles(directory=directory, html=True), name="client")
    logger.info("Serving client bundle from %s", directory)
