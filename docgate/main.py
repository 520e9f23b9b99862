import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request

from docgate.api.exception_handlers import UnknownValidatorError, install_exception_handlers
from docgate.gate.config import VALIDATOR_KINDS
from docgate.gate.document import Document
from docgate.gate.validators import VALIDATORS
from docgate.middleware.observability import install_observability_middleware
from docgate.observability.logging import setup_logging
from docgate.schemas import HealthResponse, ValidateRequest, ValidateResponse


def create_app() -> FastAPI:
    load_dotenv()
    setup_logging()
    environment = os.getenv("DOCGATE_ENV", "dev").lower()

    app = FastAPI(
        title="docgate",
        version="0.1.0",
        docs_url=None if environment == "prod" else "/docs",
        redoc_url=None if environment == "prod" else "/redoc",
        openapi_url=None if environment == "prod" else "/openapi.json",
    )
    install_observability_middleware(app)
    install_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok", validators=VALIDATOR_KINDS)

    @app.post("/validate/{kind}", response_model=ValidateResponse)
    def validate(kind: str, payload: ValidateRequest, request: Request) -> ValidateResponse:
        validator = VALIDATORS.get(kind)
        if validator is None:
            raise UnknownValidatorError(kind)

        report = validator(Document.from_text(payload.markdown, source=payload.source))
        request.state.kind = kind
        request.state.verdict = report.verdict.value
        request.state.exit_code = report.exit_code
        request.state.timings_ms = dict(report.timings_ms)

        return ValidateResponse(request_id=request.state.request_id, **report.to_dict())

    return app


app = create_app()
