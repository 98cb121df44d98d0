# Filosofia: "O que não está no log, não aconteceu."

import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

# Pasta de logs internos; pode ser redirecionada via HOOKGATE_LOG_DIR
_DEFAULT_LOG_DIR = Path(__file__).parent / "internallogs"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def get_log_dir() -> Path:
    """Diretório dos arquivos de log, criado sob demanda."""
    log_dir = Path(os.getenv("HOOKGATE_LOG_DIR", str(_DEFAULT_LOG_DIR)))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def setup_logger(name: str = "HookGate_FLS") -> logging.Logger:
    """
    Configura o logger para o HookGate_FLS.

    Args:
        name (str): O nome do logger. Default é "HookGate_FLS".

    Returns:
        logging.Logger: O logger configurado.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Evita duplicidade de log se o logger for inicializado mais de uma vez
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

        # Console: apenas INFO ou superior
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging.INFO)
        logger.addHandler(console_handler)

        # Arquivo rotativo: tudo a partir de DEBUG
        file_handler = RotatingFileHandler(
            filename=get_log_dir() / f"{name}.log",
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=13,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)
    return logger


# Instância única para ser importada em outros módulos
logger = setup_logger()
