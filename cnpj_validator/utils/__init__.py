"""
Utilitários para o CNPJ Validator.
"""

from .logger import CNPJLogger, get_logger
from .validators import CNPJValidator, is_cnpj, validate_cnpj_list

__all__ = [
    "CNPJLogger",
    "get_logger",
    "CNPJValidator",
    "is_cnpj",
    "validate_cnpj_list"
]
