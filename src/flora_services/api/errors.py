"""Tradução de erros de validação para respostas HTTP."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flora_services.observability.logging import get_logger
from flora_services.observability.middleware import get_correlation_id

logger = get_logger(__name__)

INVALID_INPUT_STATUS = 422


def _describe(errors: list[dict]) -> list[dict[str, str]]:
    """Reduz os erros do pydantic a campo + mensagem (sem ecoar o input)."""
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": str(err.get("msg", "")),
        }
        for err in errors
    ]


async def invalid_input_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Payload malformado é rejeitado inteiro; nada é gravado."""
    details = _describe(list(exc.errors()))
    logger.warning(
        "invalid_input_rejected",
        extra={
            "path": request.url.path,
            "method": request.method,
            "fields": [detail["field"] for detail in details],
        },
    )
    return JSONResponse(
        status_code=INVALID_INPUT_STATUS,
        content={
            "error": "invalid_input",
            "details": details,
            "correlation_id": get_correlation_id(),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, invalid_input_handler)
