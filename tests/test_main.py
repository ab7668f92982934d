import logging

import pytest

import main
from boardplay.utils.session import get_playback_state


SCRIPT = """const board = { x_size: 2, y_size: 1 };
let tile_snapshots = [];
tile_snapshots.push([[0], [1]]);
tile_snapshots.push([[2], [0]]);
"""


@pytest.fixture
def no_window(monkeypatch):
    opened = []

    def fake_window(world, *, cell_size):
        opened.append((world, cell_size))

    monkeypatch.setattr(main, "BoardPlaybackWindow", fake_window)
    monkeypatch.setattr(main, "run", lambda: opened.append("run"))
    return opened


def test_missing_path_returns_error(tmp_path, caplog, no_window):
    with caplog.at_level(logging.ERROR, logger="main"):
        assert main.main([str(tmp_path / "missing.js")]) == 1

    assert "Cannot load snapshots" in caplog.text
    assert no_window == []


@pytest.mark.parametrize("content", [
    b"let tile_snapshots = [];\n",
    b"\xff\xfe\x00",
    b'const board = { x_size: 2, y_size: 1 };\ntile_snapshots.push([[0, 1, 2], [0]]);\n',
])
def test_invalid_file_returns_error(tmp_path, caplog, no_window, content):
    path = tmp_path / "data.js"
    path.write_bytes(content)

    with caplog.at_level(logging.ERROR, logger="main"):
        assert main.main([str(path)]) == 1

    assert "Cannot load snapshots" in caplog.text
    assert no_window == []


@pytest.mark.parametrize("argv", [["--fps", "0"], ["--fps", "-2"], ["--cell-size", "1"]])
def test_bad_options_return_error(tmp_path, caplog, no_window, argv):
    path = tmp_path / "data.js"
    path.write_text(SCRIPT, encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="main"):
        assert main.main([str(path), *argv]) == 1

    assert "--fps must be positive" in caplog.text
    assert no_window == []


def test_valid_file_opens_window_and_runs(tmp_path, no_window):
    path = tmp_path / "data.js"
    path.write_text(SCRIPT, encoding="utf-8")

    assert main.main([str(path), "--fps", "10", "--cell-size", "8"]) == 0

    (world, cell_size), ran = no_window
    assert cell_size == 8
    assert ran == "run"
    assert get_playback_state(world).frame_rate == 10


def test_unknown_log_level_is_rejected_by_argparse():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--log-level", "TRACE"])
