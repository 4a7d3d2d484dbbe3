import argparse
import json
from pathlib import Path

import pytest

from indelcal.cli.cli import Cli, main


def _subcommand_names(cli: Cli) -> set[str]:
    for action in cli.parser._actions:  # type: ignore[attr-defined]
        if isinstance(action, argparse._SubParsersAction):
            return set(action._name_parser_map.keys())  # type: ignore[attr-defined]
    return set()


def test_cli_registers_subcommands():
    names = _subcommand_names(Cli())
    assert {"show-rates", "indel-error-rate"} <= names


def test_help_lists_commands_and_log_options():
    cli = Cli()
    assert sorted(cli.commands) == ["indel-error-rate", "show-rates"]
    assert "indel-error-rate, show-rates" in cli.parser.epilog
    help_text = cli.parser.format_help()
    assert "--log-detail" in help_text
    assert "Options for the run log" in help_text


def test_main_help_returns_2():
    cli = Cli()
    assert main(cli.parser, ["--help"]) == 2


def test_main_no_subcommand_prints_help_and_returns_1(capsys):
    cli = Cli()
    rc = main(cli.parser, ["--no-log"])
    assert rc == 1
    assert "usage:" in capsys.readouterr().out.lower()


def test_show_rates_writes_table_and_log(tmp_path: Path):
    cli = Cli()
    rc = main(cli.parser, [
        "--log-dir", str(tmp_path), "--log-name", "show.log", "--silent-mode",
        "show-rates", "-m", "adaptiveDefault", "-o", str(tmp_path / "out"), "-p", "adaptive"
    ])
    assert rc == 0
    table = tmp_path / "out" / "adaptive.indel_error_rates.tsv"
    assert table.exists()
    assert len(table.read_text().splitlines()) == 1 + 16 + 9
    assert "Using indel error model 'adaptiveDefault'" in (tmp_path / "show.log").read_text()


def test_unknown_model_fails_the_command(tmp_path: Path, capsys):
    cli = Cli()
    rc = main(cli.parser, [
        "--no-log", "--silent-mode",
        "show-rates", "-m", "bogus", "-o", str(tmp_path)
    ])
    assert rc == 1
    assert "show-rates failed" in capsys.readouterr().out


def test_indel_error_rate_from_flags(capsys):
    cli = Cli()
    rc = main(cli.parser, [
        "--no-log", "--silent-mode",
        "indel-error-rate", "-m", "logLinear", "-t", "insert", "-u", "1", "-r", "1", "-i", "16"
    ])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "5e-05\t0.0003"


def test_indel_error_rate_from_config(tmp_path: Path, capsys):
    models = tmp_path / "models.json"
    models.write_text(json.dumps({"IndelModels": [{
        "name": "calibrated", "MaxMotifLength": 1, "MaxTractLength": 3,
        "Model": [[[0.1, 0.2], [0.3, 0.4], [0.5, 0.6]]]
    }]}), encoding="utf-8")
    config = tmp_path / "query.yml"
    config.write_text(
        f"indel_error_model: calibrated\n"
        f"indel_error_model_file: {models.as_posix()}\n"
        f"ref_repeat_count: 3\n"
        f"indel_repeat_count: 2\n"
        f"indel_type: delete\n",
        encoding="utf-8"
    )
    cli = Cli()
    rc = main(cli.parser, ["--no-log", "--silent-mode", "indel-error-rate", "-c", str(config)])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "0.5\t0.4"


@pytest.mark.parametrize("model_name", ["logLinear", "adaptiveDefault"])
def test_module_entry_point(model_name, tmp_path: Path):
    import subprocess
    import sys
    proc = subprocess.run(
        [sys.executable, "-m", "indelcal", "--no-log", "--silent-mode",
         "indel-error-rate", "-m", model_name, "-t", "complex"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        cwd=tmp_path
    )
    assert proc.returncode == 0, f"STDERR:\n{proc.stderr}"
    assert len(proc.stdout.strip().split("\t")) == 2
