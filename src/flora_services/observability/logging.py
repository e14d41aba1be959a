"""Configuração de logging (JSON por padrão, texto para uso local)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from flora_services.observability.middleware import get_correlation_id

_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s"
_TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(service)s %(correlation_id)s] %(name)s: %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Insere correlation_id e service no record de log.

    Importante: nunca adicionar o texto das notificações nos logs.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else get_correlation_id()
        record.service = self._service_name
        return True


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == "text":
        return logging.Formatter(_TEXT_FORMAT)
    if log_format.lower() != "json":
        raise ValueError(f"LOG_FORMAT '{log_format}' inválido. Valores válidos: json, text")
    return JsonFormatter(_JSON_FIELDS, rename_fields={"levelname": "level", "name": "logger"})


def configure_logging(level: str, service_name: str, log_format: str = "json") -> None:
    """Instala um único handler no root logger com service/correlation_id."""

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(log_format))
    handler.addFilter(CorrelationIdFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta service/correlation_id."""

    return logging.getLogger(name)
