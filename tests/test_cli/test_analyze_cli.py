"""
Tests for the analyze and params command-line entry points.
"""
import json

import numpy as np
import pandas as pd
import pytest

from wavecli import analyze as cli_analyze
from wavecli import params as cli_params


class DummyArgs:
    def __init__(self, **kwargs):
        self.csv = kwargs.get("csv")
        self.start_date = kwargs.get("start_date")
        self.end_date = kwargs.get("end_date")
        self.config = kwargs.get("config")
        self.json = kwargs.get("json", False)
        self.output = kwargs.get("output")
        self.log_file = kwargs.get("log_file")
        self.verbose = kwargs.get("verbose", False)


@pytest.fixture
def impulse_csv(tmp_path):
    values = np.interp(np.arange(49), [0, 8, 16, 24, 32, 40, 48], [100, 120, 110, 150, 135, 145, 138])
    df = pd.DataFrame(
        {'Open': values, 'High': values + 0.5, 'Low': values - 0.5, 'Close': values},
        index=pd.date_range('2024-01-01', periods=49, freq='D'),
    )
    df.index.name = 'Date'
    path = tmp_path / 'impulse.csv'
    df.to_csv(path)
    return path


@pytest.fixture
def run_cli(monkeypatch):
    monkeypatch.setattr(cli_analyze, "setup_logging", lambda *args, **kwargs: None)

    def run(**kwargs):
        monkeypatch.setattr(
            cli_analyze.argparse.ArgumentParser,
            "parse_args",
            staticmethod(lambda: DummyArgs(**kwargs)),
        )
        return cli_analyze.main()

    return run


def test_cli_analyze_prints_text_report(run_cli, impulse_csv, capsys):
    exit_code = run_cli(csv=str(impulse_csv))
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "ELLIOTT WAVE ANALYSIS: impulse" in out
    assert "Wave 5 (5)" in out
    assert "Confidence:         55%" in out
    assert "WAVE A" in out
    assert "BULL CASE" in out


def test_cli_analyze_json_and_output_file(run_cli, impulse_csv, tmp_path, capsys):
    output = tmp_path / 'out' / 'result.json'
    exit_code = run_cli(csv=str(impulse_csv), json=True, output=str(output))

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["current_wave"] == 'Wave 5'
    assert payload["trade_setup"]["target"] == 166.16
    assert json.loads(output.read_text()) == payload


def test_cli_analyze_date_window_too_short(run_cli, impulse_csv, capsys):
    exit_code = run_cli(csv=str(impulse_csv), end_date='2024-01-10')

    assert exit_code == 1
    assert "Error: Insufficient price data" in capsys.readouterr().out


def test_cli_analyze_uses_config(run_cli, impulse_csv, tmp_path, capsys):
    config_path = tmp_path / 'short.yaml'
    config_path.write_text("projection:\n  steps: 5\n")

    exit_code = run_cli(csv=str(impulse_csv), config=str(config_path), json=True)

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [p["step"] for p in payload["projections"]] == [1, 4, 5]


def test_cli_analyze_missing_file(run_cli, tmp_path, capsys):
    assert run_cli(csv=str(tmp_path / 'missing.csv')) == 1
    assert capsys.readouterr().out == ""


def test_cli_params_lists_parameters(capsys):
    assert cli_params.main() == 0
    out = capsys.readouterr().out

    assert "PIVOT DETECTION" in out
    assert "entry_band_low" in out
    assert "(default)" in out
