"""
Sistema de logging personalizado para o CNPJ Validator.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..config import CNPJValidatorConfig


def get_logger(name: str = "cnpj_validator", level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Retorna um logger configurado com o formato padrão da biblioteca.

    Args:
        name: Nome do logger
        level: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Caminho para arquivo de log (opcional)
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # Handlers próprios; sem propagar para o root configurado pela CLI
    logger.propagate = False

    # Remove handlers existentes para evitar duplicação
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        CNPJValidatorConfig.LOG_FORMAT,
        datefmt=CNPJValidatorConfig.LOG_DATE_FORMAT
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class CNPJLogger:
    """Logger com mensagens específicas para validação de CNPJs em lote."""

    def __init__(self, name: str = "cnpj_validator", log_file: Optional[str] = None, level: str = "INFO"):
        self.logger = get_logger(name, level=level, log_file=log_file)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def log_batch_start(self, total: int) -> None:
        """Log do início da validação em lote."""
        self.info(f"Iniciando validação de {total} CNPJ(s)")

    def log_invalid_cnpj(self, value: str) -> None:
        """Log de CNPJ rejeitado."""
        self.debug(f"CNPJ inválido: {value!r}")

    def log_output_saved(self, count: int, path: str) -> None:
        """Log de gravação dos resultados."""
        self.info(f"{count} registro(s) salvos em: {path}")

    def log_validation_summary(self, total: int, valid: int, invalid: int) -> None:
        """Log do resumo final da validação."""
        valid_rate = (valid / total * 100) if total > 0 else 0
        self.info(f"Validação concluída - Total: {total}, Válidos: {valid}, Inválidos: {invalid}")
        self.info(f"Taxa de válidos: {valid_rate:.1f}%")
