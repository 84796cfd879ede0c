"""Tests for the holder-intel command line."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from src.main import build_parser, main
from src.parsers.exceptions import NoHoldersError


def test_parse_analyze():
    args = build_parser().parse_args(["analyze", "Mint111", "--name", "TOWEL"])
    assert args.command == "analyze"
    assert args.mint == "Mint111"
    assert args.name == "TOWEL"


def test_parse_snapshot_with_chain():
    args = build_parser().parse_args(["snapshot", "TOWEL", "MARVIN", "--chain", "base"])
    assert args.names == ["TOWEL", "MARVIN"]
    assert args.chain == "base"


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_prints_json(capsys):
    with (
        patch("src.main.setup_logger"),
        patch("src.main.run", new=AsyncMock(return_value={"tokens": []})),
    ):
        code = main(["price", "Mint111"])
    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"tokens": []}


def test_main_reports_fatal_error(capsys):
    with (
        patch("src.main.setup_logger"),
        patch("src.main.run", new=AsyncMock(side_effect=NoHoldersError("no holders found for token X"))),
    ):
        code = main(["analyze", "X"])
    assert code == 1
    assert "no holders found for token X" in capsys.readouterr().err
