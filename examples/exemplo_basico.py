"""Exemplo básico de uso do CNPJ Validator."""

import random
from itertools import islice

from cnpj_validator import BatchValidator, CNPJValidator, generate_valid_samples


def exemplo_simples():
    """Exemplo básico e direto."""

    cnpjs = [
        "00.000.000/0001-91",
        "11.357.093/0001-23",
        60542797000180,
    ]

    for cnpj in cnpjs:
        status = "válido" if CNPJValidator.validate_cnpj_number(cnpj) else "inválido"
        print(f"{cnpj}: {status}")


def exemplo_lote():
    """Valida CNPJs gerados e salva em Parquet."""

    amostras = list(islice(generate_valid_samples(random.Random(2024)), 100))

    validator = BatchValidator(show_progress=True)
    df = validator.validate_many(amostras)
    validator.save(df, "exemplo_cnpjs.parquet")

    stats = validator.get_stats()
    print(f"Válidos: {stats['valid']}, Inválidos: {stats['invalid']}")


if __name__ == "__main__":
    exemplo_simples()
    exemplo_lote()
