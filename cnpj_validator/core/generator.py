"""
Gerador de CNPJs válidos para testes baseados em propriedades.

O cálculo dos dígitos verificadores fica separado do validador em
``utils.validators``; os testes conferem que os dois concordam.
"""

import random
from typing import Iterator, List, Sequence

FIRST_VERIFIER_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_VERIFIER_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

# CNPJs reais conhecidos, incluindo prefixos com muitos zeros
EDGE_CASES = (
    "00000000000191",
    "60542797000180",
    "94540565000105",
    "01626036000148",
    "53980815000140",
    "94572462000127",
    "15264719000107",
)


class ValidCNPJGenerator:
    """Fonte de CNPJs válidos: casos de borda fixos e uma sequência aleatória infinita."""

    @staticmethod
    def edgecases() -> List[str]:
        return list(EDGE_CASES)

    @classmethod
    def values(cls, random_source: random.Random) -> Iterator[str]:
        """
        Gera CNPJs válidos indefinidamente.

        Args:
            random_source: gerador pseudoaleatório; a mesma semente reproduz
                a mesma sequência

        Yields:
            CNPJ com 14 dígitos, sem formatação
        """
        while True:
            digits = [random_source.randint(0, 9) for _ in range(12)]
            first = cls._first_verifier_digit(digits)
            second = cls._second_verifier_digit(digits, first)

            yield ''.join(str(d) for d in digits) + f"{first}{second}"

    @classmethod
    def _first_verifier_digit(cls, digits: Sequence[int]) -> int:
        return cls._calculate_verifier_digit(FIRST_VERIFIER_WEIGHTS, digits)

    @classmethod
    def _second_verifier_digit(cls, digits: Sequence[int], first_verifier_digit: int) -> int:
        return cls._calculate_verifier_digit(SECOND_VERIFIER_WEIGHTS, list(digits) + [first_verifier_digit])

    @staticmethod
    def _calculate_verifier_digit(weights: Sequence[int], values: Sequence[int]) -> int:
        total = 0
        for index, value in enumerate(values):
            total += value * weights[index]

        division_remainder = total % 11
        return 0 if division_remainder < 2 else 11 - division_remainder


def generate_valid_samples(random_source: random.Random) -> Iterator[str]:
    """Sequência infinita e preguiçosa de CNPJs válidos."""
    return ValidCNPJGenerator.values(random_source)


def edge_case_samples() -> List[str]:
    """Os 7 CNPJs válidos usados como casos de borda."""
    return ValidCNPJGenerator.edgecases()
