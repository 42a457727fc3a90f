"""
Configuração básica de logging da aplicação.

``setup_logging`` anexa um handler de console ao logger raiz com
timestamp, nível, nome do logger e mensagem. Chamadas repetidas (por
exemplo nos testes, que importam ``main`` várias vezes) não duplicam
handlers.
"""

import logging
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configura o logger raiz uma única vez.

    Parameters
    ----------
    level : str
        Nome do nível (``"DEBUG"``, ``"INFO"``...), sem diferenciar
        maiúsculas.
    logfile : Optional[str]
        Caminho de um arquivo de log adicional. Se omitido, apenas o
        console é usado.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
