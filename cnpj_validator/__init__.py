"""CNPJ Validator - Biblioteca para validação de CNPJs.

Valida números do Cadastro Nacional da Pessoa Jurídica pelos dígitos
verificadores e gera CNPJs válidos para testes.
"""

__version__ = "1.0.0"
__author__ = "CNPJ Validator Team"

from .utils.validators import (
    CNPJValidator,
    calculate_verification_digits,
    clean_cnpj,
    format_cnpj,
    is_cnpj,
    validate_cnpj_list,
)
from .core.generator import ValidCNPJGenerator, edge_case_samples, generate_valid_samples
from .core.batch_validator import BatchValidator
from .exceptions import CNPJValidatorError, InvalidInputTypeError, OutputError

__all__ = [
    "is_cnpj",
    "clean_cnpj",
    "format_cnpj",
    "calculate_verification_digits",
    "validate_cnpj_list",
    "CNPJValidator",
    "ValidCNPJGenerator",
    "generate_valid_samples",
    "edge_case_samples",
    "BatchValidator",
    "CNPJValidatorError",
    "InvalidInputTypeError",
    "OutputError"
]
