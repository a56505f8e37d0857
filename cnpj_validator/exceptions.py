"""Exceções da biblioteca cnpj-validator."""


class CNPJValidatorError(Exception):
    """Erro base da biblioteca."""


class InvalidInputTypeError(CNPJValidatorError, TypeError):
    """Valor que não é texto nem inteiro foi passado ao validador."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"CNPJ deve ser str ou int, recebido: {type(value).__name__}"
        )


class OutputError(CNPJValidatorError):
    """Falha ao salvar resultados de validação."""
