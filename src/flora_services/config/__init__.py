"""Configurações centralizadas do flora_services.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente
- get_settings: função cacheada para obter instância única
- Portas padrão de cada serviço

Uso típico:
    from flora_services.config import get_settings
"""

from flora_services.config.settings import (
    DEFAULT_ANALYTICS_PORT,
    DEFAULT_NOTIFICATION_PORT,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_ANALYTICS_PORT",
    "DEFAULT_NOTIFICATION_PORT",
]
