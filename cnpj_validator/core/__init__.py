"""
Módulos principais do CNPJ Validator.
"""

from .generator import ValidCNPJGenerator, edge_case_samples, generate_valid_samples
from .batch_validator import BatchValidator

__all__ = [
    "ValidCNPJGenerator",
    "edge_case_samples",
    "generate_valid_samples",
    "BatchValidator"
]
