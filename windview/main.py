"""Main application module for windview.

This module builds the FastAPI application that plays the part of the
weather screen: at startup the lifespan starts one pipeline run in the
background and serving begins right away, so the page shows a loading
message until the labels arrive.  The routes below show whatever the label
board currently holds.  ``create_app`` is the factory; the module-level
``app`` lets ASGI servers such as Uvicorn discover it
(``uvicorn windview.main:app``).
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager, suppress
from html import escape
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from .controller import WeatherController
from .display import LABEL_ORDER, LabelBoard
from .middleware import RequestLogMiddleware, log_info


def _render_page(labels: Optional[dict]) -> str:
    if labels is None:
        body = "<p>Loading weather…</p>"
    else:
        body = "\n".join(
            f'<p id="{key}">{escape(labels[key])}</p>' for key in LABEL_ORDER
        )
    return (
        "<!doctype html>\n<html><head><meta charset=\"utf-8\">"
        "<title>windview</title></head>\n<body>\n"
        f"{body}\n</body></html>\n"
    )


def create_app(controller: Optional[WeatherController] = None) -> FastAPI:
    """Factory function for constructing the FastAPI application.

    ``controller`` defaults to one publishing to a fresh :class:`LabelBoard`
    and fetching the stub weather document.  The controller's sink must be
    a :class:`LabelBoard` since the routes read the labels back from it.
    """
    if controller is None:
        controller = WeatherController(LabelBoard())
    board: LabelBoard = controller.sink

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_info("startup_pipeline_trigger", url=controller.url)
        startup_run = asyncio.create_task(controller.run())
        app.state.startup_run = startup_run
        try:
            yield
        finally:
            if not startup_run.done():
                log_info("startup_pipeline_cancelled", url=controller.url)
                startup_run.cancel()
            with suppress(asyncio.CancelledError):
                await startup_run

    app = FastAPI(title="windview", lifespan=lifespan)
    app.state.controller = controller
    app.state.startup_run = None
    app.add_middleware(RequestLogMiddleware)

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    @app.get("/", response_class=HTMLResponse)
    def web_root():
        """Serve the four labels as a minimal HTML page."""
        return HTMLResponse(_render_page(board.labels()))

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"ok": True}

    @app.get("/api/wind", tags=["Weather"])
    def rest_wind() -> JSONResponse:
        """Return the currently displayed labels.

        Responds 503 until a pipeline run has published something.
        """
        labels = board.labels()
        if labels is None:
            detail = "Weather not available yet"
            if controller.last_error is not None:
                detail = f"{detail}: {controller.last_error}"
            raise HTTPException(status_code=503, detail=detail)
        return JSONResponse({"labels": labels})

    @app.post("/api/wind/refresh", tags=["Weather"])
    async def rest_wind_refresh() -> JSONResponse:
        """Run the pipeline again and return the new labels."""
        if controller.is_running:
            raise HTTPException(status_code=409, detail="Refresh already in progress")
        projection = await controller.run()
        if projection is None:
            raise HTTPException(status_code=502, detail=str(controller.last_error))
        return JSONResponse({"labels": board.labels()})

    return app


app = create_app()
