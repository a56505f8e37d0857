"""Validadores para números de CNPJ.

O CNPJ (Cadastro Nacional da Pessoa Jurídica) tem 14 dígitos: os 12 primeiros
identificam a empresa e o estabelecimento, os 2 últimos são dígitos
verificadores calculados por módulo 11.

Referências:
    https://pt.wikipedia.org/wiki/Cadastro_Nacional_da_Pessoa_Jur%C3%ADdica
    http://normas.receita.fazenda.gov.br/sijut2consulta/link.action?visao=anotado&idAto=1893
"""

import re
from typing import Iterable, List, Sequence, Tuple, Union

from ..config import CNPJValidatorConfig
from ..exceptions import InvalidInputTypeError

CNPJ_LENGTH = 14

# Pesos por posição, alinhados aos dígitos da esquerda para a direita
FIRST_DIGIT_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_DIGIT_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

DEFAULT_IGNORED_CHARACTERS = CNPJValidatorConfig.DEFAULT_IGNORED_CHARACTERS

# Apenas 0-9 ASCII; str.isdigit() aceitaria dígitos Unicode como '²' ou '٣'
_ASCII_DIGITS = re.compile(r'[0-9]*')


def _verification_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Soma ponderada módulo 11: resto 0 ou 1 vira zero, senão 11 - resto."""
    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def calculate_verification_digits(first_twelve: str) -> str:
    """
    Calcula os dois dígitos verificadores a partir dos 12 primeiros dígitos.

    Args:
        first_twelve: 12 dígitos ASCII

    Returns:
        Os dois dígitos verificadores como texto, ex.: "91"
    """
    numbers = [int(ch) for ch in first_twelve]
    first = _verification_digit(numbers, FIRST_DIGIT_WEIGHTS)
    second = _verification_digit(numbers + [first], SECOND_DIGIT_WEIGHTS)
    return f"{first}{second}"


def clean_cnpj(value: Union[str, int],
               ignored_characters: Iterable[str] = DEFAULT_IGNORED_CHARACTERS) -> str:
    """
    Remove os caracteres ignorados de um CNPJ, preservando a ordem dos demais.

    Inteiros são convertidos pelo valor absoluto, sem preenchimento com zeros.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidInputTypeError(value)

    if isinstance(value, int):
        return str(abs(value))

    ignored = frozenset(ignored_characters)
    return ''.join(ch for ch in value if ch not in ignored)


def is_cnpj(value: Union[str, int],
            ignored_characters: Iterable[str] = DEFAULT_IGNORED_CHARACTERS) -> bool:
    """
    Verifica se o valor é um CNPJ válido.

    Textos são primeiro sanitizados, removendo ``ignored_characters`` (por
    padrão ``.``, ``-`` e ``/``, o que aceita o formato XX.XXX.XXX/XXXX-YY).
    Inteiros são validados pelo seu valor absoluto em decimal, sem sanitização;
    CNPJs com zeros à esquerda, portanto, não são válidos como inteiro.

    Args:
        value: CNPJ como texto ou inteiro
        ignored_characters: caracteres removidos antes da validação (só texto)

    Returns:
        True se o CNPJ tem formato e dígitos verificadores válidos

    Raises:
        InvalidInputTypeError: se o valor não for str nem int
    """
    clean = clean_cnpj(value, ignored_characters)

    if not _ASCII_DIGITS.fullmatch(clean) or len(clean) != CNPJ_LENGTH:
        return False

    return calculate_verification_digits(clean[:12]) == clean[12:]


def format_cnpj(value: Union[str, int]) -> str:
    """Formata CNPJ no padrão visual XX.XXX.XXX/XXXX-YY."""
    clean = clean_cnpj(value)

    if len(clean) != CNPJ_LENGTH or not _ASCII_DIGITS.fullmatch(clean):
        return str(value)

    return (f"{clean[:2]}.{clean[2:5]}.{clean[5:8]}/"
            f"{clean[8:12]}-{clean[12:]}")


class CNPJValidator:
    """Validador de números CNPJ."""

    @classmethod
    def validate_cnpj_number(cls, cnpj_number: Union[str, int],
                             ignored_characters: Iterable[str] = DEFAULT_IGNORED_CHARACTERS) -> bool:
        """Valida número CNPJ usando o algoritmo da Receita Federal."""
        return is_cnpj(cnpj_number, ignored_characters)

    @classmethod
    def format_cnpj_number(cls, cnpj_number: Union[str, int]) -> str:
        """Formata número CNPJ no padrão visual."""
        return format_cnpj(cnpj_number)

    @classmethod
    def clean_cnpj_number(cls, cnpj_number: Union[str, int],
                          ignored_characters: Iterable[str] = DEFAULT_IGNORED_CHARACTERS) -> str:
        """Remove formatação do número CNPJ."""
        return clean_cnpj(cnpj_number, ignored_characters)


def validate_cnpj_list(values: Iterable[Union[str, int]],
                       ignored_characters: Iterable[str] = DEFAULT_IGNORED_CHARACTERS
                       ) -> Tuple[List[Union[str, int]], List[Union[str, int]]]:
    """Separa uma lista de CNPJs em (válidos, inválidos), mantendo a ordem."""
    ignored = frozenset(ignored_characters)
    valid, invalid = [], []
    for value in values:
        (valid if is_cnpj(value, ignored) else invalid).append(value)
    return valid, invalid
