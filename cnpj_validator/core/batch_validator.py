"""Validação de CNPJs em lote, com exportação via Pandas e Polars."""

from typing import Any, Dict, Iterable, List, Optional, Union
from pathlib import Path

import pandas as pd
import polars as pl
from tqdm import tqdm

from ..config import CNPJValidatorConfig
from ..exceptions import OutputError
from ..utils.logger import CNPJLogger
from ..utils.validators import clean_cnpj, format_cnpj, is_cnpj

COLUMNS = ['entrada', 'cnpj_limpo', 'cnpj_formatado', 'valido']


class BatchValidator:
    """Valida listas de CNPJs e salva os resultados."""

    def __init__(self,
                 ignored_characters: Iterable[str] = CNPJValidatorConfig.DEFAULT_IGNORED_CHARACTERS,
                 show_progress: bool = True,
                 log_level: str = "INFO",
                 log_file: Optional[str] = None):
        """
        Inicializa o validador em lote.

        Args:
            ignored_characters: Caracteres removidos das entradas de texto
            show_progress: Exibe barra de progresso (tqdm)
            log_level: Nível de logging
            log_file: Caminho para arquivo de log (opcional)
        """
        self.ignored_characters = frozenset(ignored_characters)
        self.show_progress = show_progress
        self._logger = CNPJLogger(__name__, log_file=log_file, level=log_level)
        self._stats = {'total': 0, 'valid': 0, 'invalid': 0}

    def validate_many(self, values: Iterable[Union[str, int]]) -> pd.DataFrame:
        """
        Valida cada entrada e retorna um DataFrame com uma linha por entrada,
        na ordem original.
        """
        values = list(values)
        self._stats = {'total': len(values), 'valid': 0, 'invalid': 0}
        self._logger.log_batch_start(len(values))

        rows: List[Dict[str, Any]] = []
        for value in tqdm(values, desc="Validando CNPJs", disable=not self.show_progress):
            rows.append(self._validate_one(value))

        self._logger.log_validation_summary(**self._stats)
        return pd.DataFrame(rows, columns=COLUMNS)

    def _validate_one(self, value: Union[str, int]) -> Dict[str, Any]:
        valid = is_cnpj(value, self.ignored_characters)
        clean = clean_cnpj(value, self.ignored_characters)
        if valid:
            self._stats['valid'] += 1
        else:
            self._stats['invalid'] += 1
            self._logger.log_invalid_cnpj(str(value))

        return {
            'entrada': str(value),
            'cnpj_limpo': clean,
            'cnpj_formatado': format_cnpj(clean) if valid else '',
            'valido': valid,
        }

    def save(self, df: pd.DataFrame, output_file: str) -> Path:
        """
        Salva o DataFrame no formato indicado pela extensão.

        CSV, JSON e XLSX são gravados com Pandas; Parquet com Polars.
        Extensões não suportadas caem para CSV.

        Returns:
            Caminho efetivamente gravado
        """
        output_path = Path(output_file)
        extension = output_path.suffix.lower()

        if extension not in CNPJValidatorConfig.SUPPORTED_OUTPUT_FORMATS:
            self._logger.warning(f"Formato '{extension}' não suportado. Salvando como CSV.")
            output_path = output_path.with_suffix('.csv')
            extension = '.csv'

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            if extension == '.csv':
                df.to_csv(output_path, index=False, encoding=CNPJValidatorConfig.DEFAULT_OUTPUT_ENCODING)
            elif extension == '.json':
                df.to_json(output_path, orient='records', force_ascii=False, indent=4)
            elif extension == '.xlsx':
                df.to_excel(output_path, index=False, engine='openpyxl')
            else:
                pl.from_dicts(
                    df.to_dict(orient='records'),
                    schema={
                        'entrada': pl.Utf8,
                        'cnpj_limpo': pl.Utf8,
                        'cnpj_formatado': pl.Utf8,
                        'valido': pl.Boolean,
                    },
                ).write_parquet(output_path)
        except OSError as e:
            self._logger.error(f"Falha ao salvar {len(df)} registro(s) em {output_path}: {e}")
            raise OutputError(f"Falha ao salvar resultados em {output_path}: {e}") from e

        self._logger.log_output_saved(len(df), str(output_path))
        return output_path

    def get_stats(self) -> Dict[str, int]:
        """Retorna estatísticas da última validação."""
        return self._stats.copy()
