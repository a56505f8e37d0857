"""Testes para a interface de linha de comando."""

import os
import re
import subprocess
import sys
from pathlib import Path

import pandas as pd
import pytest

from cnpj_validator import is_cnpj
from cnpj_validator.cli import _get_cnpj_inputs, main

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestGenerate:
    """Testes para o subcomando generate."""

    def test_generates_requested_count(self, capsys):
        """Testa geração da quantidade pedida de CNPJs."""
        assert main(["generate", "-n", "5", "--seed", "1"]) == 0
        lines = capsys.readouterr().out.split()
        assert len(lines) == 5
        assert all(is_cnpj(cnpj) for cnpj in lines)

    def test_seed_is_reproducible(self, capsys):
        """Testa que a mesma semente gera a mesma saída."""
        main(["generate", "-n", "10", "--seed", "42"])
        first = capsys.readouterr().out
        main(["generate", "-n", "10", "--seed", "42"])
        assert capsys.readouterr().out == first

    def test_formatted_output(self, capsys):
        """Testa saída no formato XX.XXX.XXX/XXXX-YY."""
        main(["generate", "-n", "3", "--seed", "7", "--formatted"])
        for line in capsys.readouterr().out.split():
            assert re.fullmatch(r"\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}", line)
            assert is_cnpj(line)

    def test_edge_cases_come_first(self, capsys):
        """Testa casos de borda antes dos CNPJs aleatórios."""
        main(["generate", "-n", "2", "--seed", "3", "--edge-cases"])
        lines = capsys.readouterr().out.split()
        assert len(lines) == 9
        assert lines[0] == "00000000000191"

    def test_count_below_one_is_rejected(self, capsys):
        """Testa rejeição de quantidade menor que 1."""
        with pytest.raises(SystemExit) as exc:
            main(["generate", "-n", "0"])
        assert exc.value.code == 2
        assert capsys.readouterr().out == ""

    def test_invalid_sample_count_env_uses_default(self, monkeypatch, capsys):
        """Testa quantidade padrão quando CNPJ_SAMPLE_COUNT não é inteiro."""
        monkeypatch.setenv("CNPJ_SAMPLE_COUNT", "abc")
        assert main(["generate", "--seed", "1"]) == 0
        assert len(capsys.readouterr().out.split()) == 10


class TestValidate:
    """Testes para o subcomando validate."""

    def test_all_valid_exits_zero(self):
        """Testa código de saída 0 quando todos são válidos."""
        assert main(["validate", "--no-progress", "-q", "00.000.000/0001-91", "60542797000180"]) == 0

    def test_any_invalid_exits_one(self):
        """Testa código de saída 1 quando há inválidos."""
        assert main(["validate", "--no-progress", "-q", "00.000.000/0001-91", "11357093000123"]) == 1

    def test_ignore_option(self):
        """Testa a opção --ignore."""
        assert main(["validate", "--no-progress", "-q", "--ignore", ".-", "00.000.000/0001-91"]) == 1

    def test_reads_file_and_saves_output(self, tmp_path):
        """Testa leitura de arquivo de entrada e gravação do resultado."""
        source = tmp_path / "cnpjs.txt"
        source.write_text("# lista de teste\n00.000.000/0001-91\n\n60542797000180\n", encoding="utf-8")
        output = tmp_path / "resultado.csv"

        assert main(["validate", "--no-progress", "-q", str(source), "-o", str(output)]) == 0

        df = pd.read_csv(output, dtype={'cnpj_limpo': str}, encoding='utf-8-sig')
        assert df['cnpj_limpo'].tolist() == ["00000000000191", "60542797000180"]

    def test_requires_command(self):
        """Testa que um subcomando é obrigatório."""
        with pytest.raises(SystemExit):
            main([])


class TestGetCnpjInputs:
    """Testes para leitura das entradas da CLI."""

    def test_deduplicates_preserving_order(self):
        """Testa remoção de duplicatas mantendo a ordem."""
        assert _get_cnpj_inputs(["b", "a", "b"]) == ["b", "a"]

    def test_skips_comments_and_blank_lines(self, tmp_path):
        """Testa que comentários e linhas vazias são ignorados."""
        source = tmp_path / "lista.txt"
        source.write_text("#comentario\n  11222333000181  \n\n", encoding="utf-8")
        assert _get_cnpj_inputs([str(source), "00000000000191"]) == ["11222333000181", "00000000000191"]


class TestConsoleOutput:
    """Testes da saída da CLI executada como processo separado."""

    def test_batch_messages_printed_once(self):
        """Testa que as mensagens do lote aparecem uma única vez."""
        env = {**os.environ, "CNPJ_LOG_LEVEL": "INFO", "PYTHONIOENCODING": "utf-8"}
        result = subprocess.run(
            [sys.executable, "-m", "cnpj_validator.cli", "validate", "--no-progress",
             "00.000.000/0001-91", "11357093000123"],
            capture_output=True, text=True, encoding="utf-8", cwd=PROJECT_ROOT, env=env
        )

        assert result.returncode == 1
        for message in ("Iniciando validação de 2 CNPJ(s)", "Validação concluída", "Taxa de válidos"):
            assert result.stdout.count(message) == 1, result.stdout
        assert result.stdout.count("11357093000123: inválido") == 1
