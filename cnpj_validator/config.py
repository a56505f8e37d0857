"""
Configurações padrão para o CNPJ Validator.
"""

import os
from typing import Dict, Any, FrozenSet


class CNPJValidatorConfig:
    """Configurações centralizadas para o CNPJ Validator."""

    # Caracteres removidos de CNPJs formatados (XX.XXX.XXX/XXXX-YY)
    DEFAULT_IGNORED_CHARACTERS: FrozenSet[str] = frozenset({'.', '-', '/'})

    # Configurações de log
    DEFAULT_LOG_LEVEL = 'INFO'
    LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

    # Configurações de saída
    DEFAULT_OUTPUT_ENCODING = 'utf-8-sig'
    SUPPORTED_OUTPUT_FORMATS = ('.csv', '.json', '.xlsx', '.parquet')

    # Configurações do gerador
    DEFAULT_SAMPLE_COUNT = 10
    MAX_SAMPLE_COUNT = 100000

    @classmethod
    def from_env(cls) -> Dict[str, Any]:
        """Carrega configurações de variáveis de ambiente."""
        ignored = os.getenv('CNPJ_IGNORED_CHARACTERS')
        return {
            'log_level': os.getenv('CNPJ_LOG_LEVEL', cls.DEFAULT_LOG_LEVEL),
            'ignored_characters': (
                ignored if ignored is not None else ''.join(sorted(cls.DEFAULT_IGNORED_CHARACTERS))
            ),
            'show_progress': os.getenv('CNPJ_SHOW_PROGRESS', 'true').lower() == 'true',
            'sample_count': cls._int_from_env('CNPJ_SAMPLE_COUNT', cls.DEFAULT_SAMPLE_COUNT),
        }

    @staticmethod
    def _int_from_env(name: str, default: int) -> int:
        """Lê um inteiro de variável de ambiente, usando o padrão se o valor for inválido."""
        try:
            return int(os.getenv(name, default))
        except ValueError:
            return default

    @classmethod
    def validate_config(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """Valida e ajusta configurações."""
        validated = config.copy()

        level = str(validated.get('log_level', cls.DEFAULT_LOG_LEVEL)).upper()
        validated['log_level'] = level if level in cls.LOG_LEVELS else cls.DEFAULT_LOG_LEVEL

        validated['ignored_characters'] = frozenset(
            validated.get('ignored_characters', cls.DEFAULT_IGNORED_CHARACTERS)
        )
        validated['show_progress'] = bool(validated.get('show_progress', True))
        validated['sample_count'] = max(
            1, min(validated.get('sample_count', cls.DEFAULT_SAMPLE_COUNT), cls.MAX_SAMPLE_COUNT)
        )

        return validated


# Configurações para a suíte de testes
TESTING_CONFIG = {
    'log_level': 'WARNING',
    'show_progress': False,
    'sample_count': 5,
}
