"""Interface de linha de comando do CNPJ Validator."""

import argparse
import logging
import random
import sys
from itertools import islice
from pathlib import Path
from typing import List, Optional

from .config import CNPJValidatorConfig
from .core.batch_validator import BatchValidator
from .core.generator import edge_case_samples, generate_valid_samples
from .exceptions import CNPJValidatorError
from .utils.validators import format_cnpj


def main(argv: Optional[List[str]] = None) -> int:
    """Função principal da CLI."""
    config = CNPJValidatorConfig.validate_config(CNPJValidatorConfig.from_env())

    parser = argparse.ArgumentParser(
        prog="cnpj-validator",
        description="CNPJ Validator - Validação e geração de CNPJs",
        formatter_class=argparse.RawTextHelpFormatter
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Valida CNPJs",
                                            formatter_class=argparse.RawTextHelpFormatter)
    validate_parser.add_argument("cnpjs", nargs="+",
                                 help="CNPJs a serem validados.\n"
                                      "Pode ser uma lista de números ou o caminho para um arquivo de texto\n"
                                      "(um CNPJ por linha, linhas com '#' são ignoradas).")
    validate_parser.add_argument("-o", "--output",
                                 help="Arquivo de saída (.csv, .json, .xlsx ou .parquet)")
    validate_parser.add_argument("--ignore", default=''.join(sorted(config['ignored_characters'])),
                                 help="Caracteres removidos antes da validação (padrão: '-./')")
    validate_parser.add_argument("--no-progress", action="store_true",
                                 help="Não exibe a barra de progresso.")
    validate_parser.add_argument("-q", "--quiet", action="store_true",
                                 help="Executa em modo silencioso, exibindo apenas erros críticos.")

    generate_parser = subparsers.add_parser("generate", help="Gera CNPJs válidos para testes")
    generate_parser.add_argument("-n", "--count", type=int, default=config['sample_count'],
                                 help=f"Quantidade de CNPJs (padrão: {config['sample_count']})")
    generate_parser.add_argument("--seed", type=int, default=None,
                                 help="Semente para reproduzir a mesma sequência")
    generate_parser.add_argument("--formatted", action="store_true",
                                 help="Exibe no formato XX.XXX.XXX/XXXX-YY")
    generate_parser.add_argument("--edge-cases", action="store_true",
                                 help="Exibe os CNPJs de casos de borda antes dos aleatórios")

    args = parser.parse_args(argv)

    if args.command == "generate":
        if args.count < 1:
            generate_parser.error("--count deve ser maior ou igual a 1")
        return _run_generate(args)

    log_level = logging.WARNING if args.quiet else getattr(logging, config['log_level'])
    logging.basicConfig(level=log_level, format='%(message)s', stream=sys.stdout)

    cnpjs = _get_cnpj_inputs(args.cnpjs)
    if not cnpjs:
        logging.error("Nenhum CNPJ foi fornecido ou encontrado.")
        return 1

    validator = BatchValidator(
        ignored_characters=args.ignore,
        show_progress=config['show_progress'] and not args.no_progress,
        log_level=logging.getLevelName(log_level)
    )

    try:
        df = validator.validate_many(cnpjs)
        for row in df.itertuples(index=False):
            status = "válido" if row.valido else "inválido"
            logging.info(f"{row.entrada}: {status}")

        if args.output:
            validator.save(df, args.output)

    except KeyboardInterrupt:
        logging.warning("\nOperação interrompida pelo usuário.")
        return 130
    except CNPJValidatorError as e:
        logging.error(f"Erro: {e}")
        return 1

    stats = validator.get_stats()
    return 0 if stats['invalid'] == 0 else 1


def _run_generate(args: argparse.Namespace) -> int:
    """Imprime CNPJs válidos, um por linha."""
    count = min(args.count, CNPJValidatorConfig.MAX_SAMPLE_COUNT)
    samples = list(islice(generate_valid_samples(random.Random(args.seed)), count))
    if args.edge_cases:
        samples = edge_case_samples() + samples

    for cnpj in samples:
        print(format_cnpj(cnpj) if args.formatted else cnpj)
    return 0


def _get_cnpj_inputs(inputs: List[str]) -> List[str]:
    """Extrai CNPJs de uma lista de strings, que podem ser números ou caminhos de arquivo."""
    cnpjs = []
    for item in inputs:
        path = Path(item)
        if path.is_file():
            try:
                with path.open('r', encoding='utf-8') as f:
                    for line in f:
                        line = line.strip()
                        if line and not line.startswith('#'):
                            cnpjs.append(line)
            except IOError as e:
                logging.warning(f"Não foi possível ler o arquivo {item}: {e}")
        else:
            cnpjs.append(item)
    return list(dict.fromkeys(cnpjs))


if __name__ == "__main__":
    sys.exit(main())
