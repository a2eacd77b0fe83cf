import contextlib
import logging
from datetime import datetime
from typing import AsyncIterator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.background import BackgroundTask
from starlette.requests import ClientDisconnect
from starlette.types import Message, Receive, Scope, Send

from radarchart.cache import ImageCacheBase, MemoryImageCache
from radarchart.exceptions import RenderError, TransmissionError, ValidationError
from radarchart.logger import ConsoleLogger, Logger
from radarchart.query import compute_note, normalize_request, parse_chart_query
from radarchart.render import ChartRenderer, ChartRendererBase
from radarchart.settings import DEFAULT_MAX_AGE

SERVICE_NAME = "radarchart"
IMAGE_MEDIA_TYPE = "image/png"

MSG_RENDER_FAILED = "Failed to generate chart"
MSG_SEND_FAILED = "Failed to send chart image"


class ImageResponse(Response):
    """
    PNG response that reports transmission failures instead of raising them

    The background task (the cache write) only runs once the body went out,
    so a failed send never caches anything. If the failure happens before
    the status line was sent, a plain-text 500 is attempted.
    """

    media_type = IMAGE_MEDIA_TYPE

    def __init__(
        self,
        content: bytes,
        max_age: int,
        logger: Logger,
        background: Optional[BackgroundTask] = None,
    ):
        super().__init__(
            content=content,
            headers={"Cache-Control": f"public, max-age={max_age}"},
            background=background,
        )
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        started = False

        async def tracked_send(message: Message) -> None:
            nonlocal started
            await send(message)
            if message["type"] == "http.response.start":
                started = True

        try:
            await super().__call__(scope, receive, tracked_send)
        except (OSError, ClientDisconnect) as e:
            error = TransmissionError(f"Failed to send chart image: {str(e)}")
            self.logger.error(
                "Transmission failed",
                error=str(error),
                error_type=type(error).__name__,
                cause=type(e).__name__,
                size_bytes=len(self.body),
                headers_sent=started,
            )
            if not started:
                await self._send_failure(scope, receive, send)

    async def _send_failure(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await PlainTextResponse(MSG_SEND_FAILED, status_code=500)(scope, receive, send)
        except (OSError, ClientDisconnect) as e:
            self.logger.debug("Client gone before error response", error=str(e))


class ChartWebServer:
    def __init__(
        self,
        cache: Optional[ImageCacheBase] = None,
        renderer: Optional[ChartRendererBase] = None,
        max_age: int = DEFAULT_MAX_AGE,
        log_level: int = logging.INFO,
    ):
        """
        Initialize ChartWebServer

        Args:
            cache: Rendered image cache (defaults to a MemoryImageCache)
            renderer: Chart renderer (defaults to a ChartRenderer with the legacy theme)
            max_age: Cache-Control max-age sent with every image
            log_level: Logging level (logging.DEBUG, logging.INFO, etc.)
        """
        self.logger = ConsoleLogger(name="web_server", level=log_level)
        self.cache = cache if cache is not None else MemoryImageCache()
        self.renderer = renderer if renderer is not None else ChartRenderer()
        self.max_age = max_age

        self.app = FastAPI(
            title=SERVICE_NAME,
            description="Legacy-compatible radar chart image service",
            lifespan=self._lifespan,
        )

        self.logger.info(
            "Web server initialized",
            cache=type(self.cache).__name__,
            renderer=type(self.renderer).__name__,
            max_age=max_age,
        )
        self._setup_routes()

    @contextlib.asynccontextmanager
    async def _lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        """Run the cache's background sweeper for the life of the app"""
        self.cache.start()
        try:
            yield
        finally:
            self.cache.stop()

    @staticmethod
    def _first_values(request: Request) -> Dict[str, str]:
        """Map each query parameter to its first value"""
        params: Dict[str, str] = {}
        for key, value in request.query_params.multi_items():
            params.setdefault(key, value)
        return params

    def _image_response(self, image: bytes, background: Optional[BackgroundTask] = None) -> ImageResponse:
        return ImageResponse(image, max_age=self.max_age, logger=self.logger, background=background)

    def _store(self, cache_key: str, image: bytes) -> None:
        self.cache.set(cache_key, image)
        self.logger.debug("Chart cached", cache_key=cache_key, size_bytes=len(image))

    def _setup_routes(self):
        @self.app.get("/ping")
        def ping():
            """
            Health check endpoint that returns the current server time.
            """
            current_time = datetime.now().isoformat()
            self.logger.debug("Ping request received", timestamp=current_time)
            return JSONResponse(
                content={
                    "status": "ok",
                    "timestamp": current_time,
                    "service": SERVICE_NAME,
                    "cache_entries": len(self.cache),
                }
            )

        @self.app.get("/chart")
        def render_chart(request: Request):
            """
            Render a radar chart from legacy chart URL parameters.

            Declared sync so each request runs on the framework's thread pool.
            Errors are answered with plain-text 400/500 responses; nothing
            here lets an exception escape to the server.
            """
            cache_key = request.url.query
            client_host = request.client.host if request.client else "unknown"

            cached = self.cache.get(cache_key)
            if cached is not None:
                self.logger.info(
                    "GET /chart served from cache", client=client_host, size_bytes=len(cached)
                )
                return self._image_response(cached)

            self.logger.info("GET /chart request received", client=client_host, query=cache_key)

            try:
                chart = normalize_request(parse_chart_query(self._first_values(request)))
                note = compute_note(chart.series)
            except ValidationError as e:
                self.logger.warning(
                    "Validation failed", param=e.param, value=e.value, error=e.message
                )
                return PlainTextResponse(e.message, status_code=400)

            try:
                image = self.renderer.render(chart, note)
            except RenderError as e:
                self.logger.error("Render failed", error=str(e), width=chart.width, height=chart.height)
                return PlainTextResponse(MSG_RENDER_FAILED, status_code=500)
            except Exception as e:
                self.logger.error(
                    "Unexpected error during render",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return PlainTextResponse(MSG_RENDER_FAILED, status_code=500)

            self.logger.info(
                "Chart rendered",
                width=chart.width,
                height=chart.height,
                series=chart.series_count,
                note=note,
                size_bytes=len(image),
            )

            return self._image_response(
                image, background=BackgroundTask(self._store, cache_key, image)
            )
