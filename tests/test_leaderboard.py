import pytest

from starshooter.leaderboard import LeaderBoard


def test_entries_sorted_descending():
    board = LeaderBoard()
    board.insert(10, "alice")
    board.insert(30, "bob")
    board.insert(20, "carol")
    assert board.entries() == [(30, "bob"), (20, "carol"), (10, "alice")]


def test_equal_scores_keep_insertion_order():
    board = LeaderBoard()
    board.insert(10, "first")
    board.insert(10, "second")
    board.insert(10, "third")
    assert [name for _, name in board] == ["first", "second", "third"]


def test_default_capacity_trims_lowest():
    board = LeaderBoard()
    for score in range(9):
        board.insert(score, f"p{score}")
    assert len(board) == 8
    assert (0, "p0") not in board.entries()
    assert board.entries()[0] == (8, "p8")


def test_tie_at_bottom_drops_newcomer():
    board = LeaderBoard(capacity=2)
    board.insert(5, "old")
    board.insert(7, "top")
    board.insert(5, "new")
    assert board.entries() == [(7, "top"), (5, "old")]


def test_save_writes_score_name_lines(tmp_path):
    board = LeaderBoard()
    board.insert(10, "alice")
    board.insert(20, "bob")
    path = tmp_path / "save.dat"
    board.save(path)
    assert path.read_text(encoding="utf-8") == "20 bob\n10 alice\n"


def test_save_load_round_trip(tmp_path):
    board = LeaderBoard()
    for score, name in [(15, "x"), (40, "y"), (15, "z"), (3, "w")]:
        board.insert(score, name)
    path = tmp_path / "save.dat"
    board.save(path)
    other = LeaderBoard()
    other.load(path)
    assert other.entries() == board.entries()


def test_load_replaces_existing_entries(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("5 a\n", encoding="utf-8")
    board = LeaderBoard()
    board.insert(100, "gone")
    board.load(path)
    assert board.entries() == [(5, "a")]


def test_load_stops_at_unparsable_score(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("5 a\nx b\n7 c\n", encoding="utf-8")
    board = LeaderBoard()
    board.load(path)
    assert board.entries() == [(5, "a")]


def test_load_does_not_trim(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("".join(f"{i} n{i}\n" for i in range(10)), encoding="utf-8")
    board = LeaderBoard()
    board.load(path)
    assert len(board) == 10


def test_load_missing_file_raises_and_keeps_entries(tmp_path):
    board = LeaderBoard()
    board.insert(1, "kept")
    with pytest.raises(FileNotFoundError):
        board.load(tmp_path / "missing.dat")
    assert board.entries() == [(1, "kept")]


def test_entries_returns_copy():
    board = LeaderBoard()
    board.insert(1, "a")
    board.entries().clear()
    assert len(board) == 1