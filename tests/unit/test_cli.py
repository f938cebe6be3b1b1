from pathlib import Path

import pytest

from identicon import generate
from identicon.cli import build_parser, main, save_image


def test_save_image_writes_named_png(tmp_path: Path) -> None:
    path = save_image(b"data", "alice", tmp_path)
    assert path == tmp_path / "alice.png"
    assert path.read_bytes() == b"data"


def test_main_writes_one_file_per_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["alice", "bob", "-o", str(tmp_path)]) == 0
    assert (tmp_path / "alice.png").read_bytes() == generate("alice")
    assert (tmp_path / "bob.png").read_bytes() == generate("bob")
    out = capsys.readouterr().out.splitlines()
    assert out == [str(tmp_path / "alice.png"), str(tmp_path / "bob.png")]


def test_main_reports_write_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing"
    assert main(["alice", "-o", str(missing)]) == 1
    assert "cannot write" in capsys.readouterr().err


def test_parser_requires_input() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["alice"])
    assert args.inputs == ["alice"]
    assert args.output_dir == Path(".")
    assert args.verbose is False
