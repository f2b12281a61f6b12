"""HTTP service for the reading-order pipeline.

Endpoints:
    GET  /health          → "OK"
    GET  /status          → running state, request/success/error counters, config
    POST /process         → detector JSON body (single page or {name, pages})
    POST /process/base64  → {"data": <base64 detector JSON>, "filename": "..."}

Both POST endpoints answer with
    {"name", "pages", "skipped", "time_ms", "markdown", "content_list"}
and with {"error": "..."} on failure (400 for bad input, 500 otherwise).
"""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import logging
import threading
import time
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from readorder import ReadingOrderPipeline
from readorder.config import OrderingConfig
from readorder.conversion.input import parse_document
from readorder.exceptions import FileFormatError, PipelineError

logger = logging.getLogger(__name__)

__all__ = ["ServerStats", "create_app", "main"]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class ServerStats:
    """Request counters shared by all request handlers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._requests = 0
        self._success = 0
        self._errors = 0

    def record_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_success(self) -> None:
        with self._lock:
            self._success += 1

    def record_error(self) -> None:
        with self._lock:
            self._errors += 1

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return {"requests": self._requests, "success": self._success, "errors": self._errors}


class _BadRequest(Exception):
    """Request body that cannot be turned into pages."""


def _load_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise _BadRequest(f"Invalid JSON: {e}") from e


def _decode_base64_body(raw: bytes) -> tuple[Any, str]:
    body = _load_json(raw)
    if not isinstance(body, dict) or not isinstance(body.get("data"), str):
        raise _BadRequest("Expected a JSON object with a 'data' string field")

    try:
        decoded = base64.b64decode(body["data"], validate=True)
    except (binascii.Error, ValueError) as e:
        raise _BadRequest(f"Invalid base64 data: {e}") from e

    filename = body.get("filename")
    default_name = Path(filename).stem if isinstance(filename, str) and filename else "upload"
    return _load_json(decoded), default_name


def create_app(config: OrderingConfig | None = None, pipeline: ReadingOrderPipeline | None = None) -> FastAPI:
    """Build the FastAPI application around one pipeline instance.

    Args:
        config: Ordering configuration (ignored when ``pipeline`` is given)
        pipeline: Prebuilt pipeline, mainly for tests

    Raises:
        InvalidConfigError: If the configuration is invalid
    """
    pipeline = pipeline or ReadingOrderPipeline(config)
    stats = ServerStats()

    app = FastAPI(title="readorder", description="XY-Cut++ reading order over detected layouts")
    app.state.pipeline = pipeline
    app.state.stats = stats

    def _order(data: Any, default_name: str) -> dict[str, Any]:
        start_time = time.perf_counter()
        name, pages = parse_document(data, default_name=default_name)
        document = pipeline.process_document(pages, name=name)
        return {
            "name": document.name,
            "pages": document.processed_pages,
            "skipped": document.skipped_elements,
            "time_ms": (time.perf_counter() - start_time) * 1000,
            "markdown": pipeline.render_markdown(document),
            "content_list": pipeline.render_content_list(document),
        }

    async def _handle(request: Request, base64_body: bool) -> JSONResponse:
        stats.record_request()
        raw = await request.body()

        try:
            if base64_body:
                data, default_name = _decode_base64_body(raw)
            else:
                data, default_name = _load_json(raw), "document"
            result = await run_in_threadpool(_order, data, default_name)
        except (_BadRequest, FileFormatError) as e:
            stats.record_error()
            logger.warning("Rejected request to %s: %s", request.url.path, e)
            return JSONResponse(status_code=400, content={"error": str(e)})
        except PipelineError as e:
            stats.record_error()
            logger.error("Processing error: %s", e)
            return JSONResponse(status_code=500, content={"error": str(e)})
        except Exception as e:  # noqa: BLE001 - every failure must still answer and count
            stats.record_error()
            logger.error("Unexpected error: %s", e, exc_info=True)
            return JSONResponse(status_code=500, content={"error": str(e)})

        stats.record_success()
        logger.info("Processed '%s': %d pages in %.2fms", result["name"], result["pages"], result["time_ms"])
        return JSONResponse(status_code=200, content=result)

    @app.get("/health", response_class=PlainTextResponse)
    def health() -> str:
        return "OK"

    @app.get("/status")
    def status() -> dict[str, Any]:
        return {
            "status": "running",
            **stats.snapshot(),
            "sorter": pipeline.sorter_name,
            "config": pipeline.config.to_dict(),
        }

    @app.post("/process")
    async def process(request: Request) -> JSONResponse:
        return await _handle(request, base64_body=False)

    @app.post("/process/base64")
    async def process_base64(request: Request) -> JSONResponse:
        return await _handle(request, base64_body=True)

    return app


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reading order recovery - HTTP service")
    parser.add_argument("--host", "-H", type=str, default=DEFAULT_HOST, help=f"Bind address (default: {DEFAULT_HOST})")
    parser.add_argument("--port", "-p", type=int, default=DEFAULT_PORT, help=f"Port number (default: {DEFAULT_PORT})")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (default: settings/config.yaml when present)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def main() -> int:
    """Server entry point."""
    import uvicorn  # noqa: PLC0415 - only needed when actually serving

    from readorder.cli import setup_logging  # noqa: PLC0415

    args = _build_argument_parser().parse_args()
    setup_logging(args.log_level)

    try:
        app = create_app(OrderingConfig.from_cli(args))
    except PipelineError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Starting readorder HTTP server on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0
