import pytest

import scrabbler.dictionary
from scrabbler.cli import main
from scrabbler.gaddag import deserialize


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CAT\nCATS\nAT\n", encoding="utf-8")
    return path


@pytest.fixture
def board_file(tmp_path):
    rows = ["." * 15] * 15
    rows[7] = "......CAT......"
    path = tmp_path / "board.txt"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_default_paths(monkeypatch):
    monkeypatch.setattr(scrabbler.dictionary, "DEFAULT_SEARCH_PATHS", ())


def test_moves(word_file, board_file, capsys):
    code = main(["moves", "--rack", "s", "--dict", str(word_file), "--board", str(board_file)])
    assert code == 0
    out = capsys.readouterr().out
    assert "Found 1 moves" in out
    assert "BEST MOVE: Play 'CATS' at (7,6) horizontally > for 6 points!" in out
    assert "S>(7,9)" in out
    assert "Rack tiles used: S\n" in out


def test_blank_shown_in_rack_tiles_used(word_file, board_file, capsys):
    assert main(["moves", "--rack", "?", "--dict", str(word_file), "--board", str(board_file)]) == 0
    out = capsys.readouterr().out
    assert "BEST MOVE: Play 'CATS'" in out
    assert "Rack tiles used: ?\n" in out


def test_moves_on_empty_board(word_file, capsys):
    code = main(["moves", "--rack", "CATS", "--dict", str(word_file), "--top", "3"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Found 18 moves" in out
    assert "for 12 points!" in out


def test_no_moves(word_file, capsys):
    assert main(["moves", "--rack", "QZ", "--dict", str(word_file)]) == 0
    assert "No valid moves found" in capsys.readouterr().out


def test_build_then_use_cache(word_file, tmp_path, capsys):
    out_path = tmp_path / "words.gaddag"
    assert main(["build", "--dict", str(word_file), "--out", str(out_path)]) == 0
    assert deserialize(out_path.read_bytes()).words() == ["AT", "CAT", "CATS"]
    assert "Wrote <Gaddag" in capsys.readouterr().out

    # the cache alone is enough once it exists
    word_file.unlink()
    assert main(["moves", "--rack", "CATS", "--gaddag", str(out_path)]) == 0
    assert "Found 18 moves" in capsys.readouterr().out


def test_missing_dictionary(tmp_path):
    assert main(["moves", "--rack", "CATS", "--dict", str(tmp_path / "nope.txt")]) == 1


def test_bad_rack(word_file):
    assert main(["moves", "--rack", "CA1", "--dict", str(word_file)]) == 1


def test_bad_board(word_file, tmp_path):
    board = tmp_path / "board.txt"
    board.write_text("too short\n", encoding="utf-8")
    assert main(["moves", "--rack", "CATS", "--dict", str(word_file), "--board", str(board)]) == 1


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
