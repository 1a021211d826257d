from __future__ import annotations

import json

import pytest

from pixqr.cli import main

from .conftest import REFERENCE_CODE, REFERENCE_KEY


def test_generate_prints_code(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(
        ["generate", "--key", REFERENCE_KEY, "--key-type", "RANDOM", "--name", "Fulano de Tal", "--city", "BRASILIA"]
    )
    assert exit_code == 0
    assert capsys.readouterr().out.strip() == REFERENCE_CODE


def test_generate_reports_service_errors(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["generate", "--key", "123", "--key-type", "PHONE", "--name", "Loja", "--city", "RIO"])
    assert exit_code == 1
    assert "ERR_INVALID_KEY: Invalid PHONE key format: 123" in capsys.readouterr().err


def test_validate_exit_codes(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", REFERENCE_CODE]) == 0
    assert capsys.readouterr().out.strip() == "valid"
    assert main(["validate", "invalid"]) == 1
    assert capsys.readouterr().out.strip() == "invalid"


def test_decode_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", REFERENCE_CODE]) == 0
    fields = json.loads(capsys.readouterr().out)
    assert fields["key"] == REFERENCE_KEY
    assert fields["transaction_id"] is None


def test_random_key(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["random-key"]) == 0
    assert len(capsys.readouterr().out.strip()) == 36
