"""
Módulo de Logging Centralizado.

Todos os módulos do painel usam 'get_logger(__name__)' em vez de 'print'.
"""

import logging
import os
import sys

FORMATO_LOG = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'


def _nivel_padrao() -> int:
    nivel = os.environ.get('LOG_LEVEL', 'INFO').upper()
    return getattr(logging, nivel, logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    Retorna um logger com formatação padronizada.

    Args:
        name (str): O nome do módulo que está chamando o log (geralmente __name__).

    Returns:
        logging.Logger: Instância configurada do logger.
    """
    logger = logging.getLogger(name)

    # Evita adicionar múltiplos handlers se o logger já estiver configurado
    if not logger.handlers:
        logger.setLevel(_nivel_padrao())

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(FORMATO_LOG))
        logger.addHandler(handler)

    return logger


def configurar_nivel(nivel: str) -> None:
    """Aplica o LOG_LEVEL da configuração a todos os loggers do pacote."""
    valor = getattr(logging, nivel.upper(), logging.INFO)
    for nome, logger in logging.root.manager.loggerDict.items():
        if nome.startswith('painel_docente') and isinstance(logger, logging.Logger):
            logger.setLevel(valor)
