"""Logging estruturado em JSON para o back-office.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="aprove_backoffice")
    logger = get_logger(__name__)
    logger.info("payment_created", extra={"component": "payment_service"})

Todo registro carrega correlation_id e service. Telefones, documentos e
textos de mensagem nunca entram nos logs.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
