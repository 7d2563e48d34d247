"""
Tests for the command-line scripts.
"""

import runpy
import sys
from pathlib import Path

import pytest

SCRIPTS = Path(__file__).parent.parent / 'scripts'
CONFIGS = Path(__file__).parent.parent / 'configs'


def _run(monkeypatch, script, *args):
    monkeypatch.setattr(sys, 'argv', [script, *args])
    runpy.run_path(str(SCRIPTS / script), run_name='__main__')


def test_body_report_missing_catalog(monkeypatch):
    """A missing catalog file exits with status 1 instead of a traceback."""
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'body_report.py', 'moon', '--catalog', 'does_not_exist.yaml')
    assert exc_info.value.code == 1


def test_body_report_malformed_catalog(monkeypatch, tmp_path):
    catalog_path = tmp_path / 'bad.yaml'
    catalog_path.write_text("bodies:\n  - name: Confused\n    mass: 3 km\n    equatorial_radius: 1 km\n")

    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'body_report.py', 'confused', '--catalog', str(catalog_path))
    assert exc_info.value.code == 1


def test_body_report_missing_settings(monkeypatch):
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'body_report.py', 'moon', '--settings', 'does_not_exist.yaml')
    assert exc_info.value.code == 1


def test_body_report_prints_report(monkeypatch, capsys):
    _run(monkeypatch, 'body_report.py', 'charon', '--catalog', str(CONFIGS / 'example_catalog.yaml'))
    assert "BODY REPORT - CHARON" in capsys.readouterr().out


def test_validate_catalog_exit_codes(monkeypatch):
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'validate_catalog.py', str(CONFIGS / 'example_catalog.yaml'))
    assert exc_info.value.code == 0

    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, 'validate_catalog.py', str(CONFIGS / 'invalid_catalog.yaml'))
    assert exc_info.value.code == 1
