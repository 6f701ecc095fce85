from pathlib import Path

import pytest

from identicon.cli import build_parser, main
from identicon.config import IdenticonConfig
from identicon.pipeline import generate_identicon


def test_main_writes_one_png_per_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["alice", "bob", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "alice.png").read_bytes() == generate_identicon("alice")
    assert (tmp_path / "bob.png").read_bytes() == generate_identicon("bob")
    out = capsys.readouterr().out.splitlines()
    assert out == [str(tmp_path / "alice.png"), str(tmp_path / "bob.png")]


def test_main_creates_output_dir(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "avatars"
    assert main(["alice", "--output-dir", str(target)]) == 0
    assert (target / "alice.png").exists()


def test_main_reports_encoding_failure(tmp_path: Path) -> None:
    code = main(["ok", "ünïcødé", "--encoding", "ascii", "--output-dir", str(tmp_path)])
    assert code == 1
    assert (tmp_path / "ok.png").exists()
    assert not (tmp_path / "ünïcødé.png").exists()


def test_main_requires_input() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_config_from_args() -> None:
    args = build_parser().parse_args(["x", "--log-level", "debug", "--encoding", "latin-1"])
    config = IdenticonConfig.from_args(args)
    assert config == IdenticonConfig(encoding="latin-1", output_dir=".", log_level="DEBUG")


def test_main_reports_unknown_codec(tmp_path: Path) -> None:
    assert main(["alice", "--encoding", "no-such-codec", "--output-dir", str(tmp_path)]) == 1
    assert not (tmp_path / "alice.png").exists()
