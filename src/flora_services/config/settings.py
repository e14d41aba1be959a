"""Configurações dos serviços via variáveis de ambiente.

Os dois serviços (analytics e notificações) compartilham a mesma classe
de configuração; cada um lê apenas a porta que lhe cabe.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# -----------------------------------------------------------------------------
# Portas padrão (valores de configuração, não de contrato)
# -----------------------------------------------------------------------------
DEFAULT_NOTIFICATION_PORT: int = 3001
DEFAULT_ANALYTICS_PORT: int = 3002


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
    )

    # Aplicação
    version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Observabilidade
    log_format: str = "json"  # json | text
    enable_request_logging: bool = True  # Uma linha por request (sem corpo)

    # HTTP
    host: str = "0.0.0.0"  # noqa: S104 - bind em todas as interfaces (container)
    analytics_port: int = DEFAULT_ANALYTICS_PORT
    notification_port: int = DEFAULT_NOTIFICATION_PORT
    docs_url: str = "/api-docs"
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Armazenamento de registros
    record_store_backend: str = "memory"  # memory (único backend suportado)
    seed_fixtures: bool = True  # Semeia cada store com os registros de exemplo

    def validate_record_store_config(self) -> list[str]:
        """Valida backend do record store.

        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        backend = self.record_store_backend.lower()

        valid_backends = {"memory"}
        if backend not in valid_backends:
            errors.append(
                f"RECORD_STORE_BACKEND '{backend}' inválido. Valores válidos: {valid_backends}"
            )

        return errors

    def validate_ports(self) -> list[str]:
        """Valida faixa das portas e conflito entre os dois serviços.

        Porta 0 pede ao uvicorn uma porta efêmera.
        """
        errors: list[str] = []

        for name, port in (
            ("ANALYTICS_PORT", self.analytics_port),
            ("NOTIFICATION_PORT", self.notification_port),
        ):
            if not 0 <= port <= 65535:
                errors.append(f"{name}={port} fora da faixa 0-65535")

        if self.analytics_port == self.notification_port:
            errors.append(
                "ANALYTICS_PORT e NOTIFICATION_PORT não podem ser iguais "
                f"({self.analytics_port})"
            )

        return errors

    def validate_logging(self) -> list[str]:
        """Valida LOG_FORMAT e LOG_LEVEL."""
        errors: list[str] = []

        if self.log_format.lower() not in ("json", "text"):
            errors.append(f"LOG_FORMAT '{self.log_format}' inválido. Valores válidos: json, text")

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"LOG_LEVEL '{self.log_level}' inválido")

        return errors

    def validate_docs_url(self) -> list[str]:
        """DOCS_URL precisa ser um caminho absoluto."""
        if not self.docs_url.startswith("/"):
            return [f"DOCS_URL '{self.docs_url}' deve começar com '/'"]
        return []

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
