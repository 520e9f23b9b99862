import logging
import re
import time
from uuid import uuid4

from fastapi import FastAPI, Request

from docgate.observability.logging import log_event

logger = logging.getLogger("docgate.http")

REQUEST_ID_HEADER = "X-Request-Id"
SAFE_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{8,64}$")
VERDICT_STATE_KEYS = ["kind", "verdict", "exit_code", "error_code"]


def _latency_ms(start: float) -> int:
    return int(round((time.perf_counter() - start) * 1000))


def _validation_fields(request: Request) -> dict:
    """Verdict state and phase timings left on request.state by the validate route."""
    fields = {}
    for key in VERDICT_STATE_KEYS:
        value = getattr(request.state, key, None)
        if value is not None:
            fields[key] = value
    fields.update(getattr(request.state, "timings_ms", None) or {})
    return fields


def install_observability_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def observability_middleware(request: Request, call_next):  # type: ignore[override]
        start = time.perf_counter()
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        request_id = incoming if SAFE_REQUEST_ID_PATTERN.fullmatch(incoming) else str(uuid4())
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            log_event(
                logger,
                {
                    "event": "request.failed",
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": 500,
                    "latency_ms": _latency_ms(start),
                    **_validation_fields(request),
                },
                logging.ERROR,
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        log_event(
            logger,
            {
                "event": "request.completed",
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "latency_ms": _latency_ms(start),
                **_validation_fields(request),
            },
        )
        return response
