"""
Tests for env/CLI resolution of viewer settings.
"""

from pathviz.app.settings import Settings, resolve_settings


def test_defaults() -> None:
    assert resolve_settings([], {}) == Settings("astar", 20, 30, None, 1.0)


def test_environment() -> None:
    env = {"PATHVIZ_ALGO": "DFS", "PATHVIZ_ROWS": "8", "PATHVIZ_MAP": "02_zigzag"}
    s = resolve_settings([], env)
    assert (s.algo, s.rows, s.cols, s.map) == ("dfs", 8, 30, "02_zigzag")


def test_cli_overrides_environment() -> None:
    s = resolve_settings(["--algo=dijkstra", "--cols=12", "--speed=2.5"],
                         {"PATHVIZ_ALGO": "dfs", "PATHVIZ_COLS": "40"})
    assert (s.algo, s.cols, s.speed) == ("dijkstra", 12, 2.5)


def test_bad_values_fall_back_with_a_warning(capsys) -> None:
    s = resolve_settings(["--algo=bfs", "--rows=zero", "--cols=1", "--speed=-3"], {})
    assert s == Settings()
    out = capsys.readouterr().out
    assert "Unknown algorithm 'bfs'" in out
    assert "--rows='zero'" in out
    assert "--cols='1'" in out
    assert "--speed='-3'" in out


def test_unrelated_arguments_are_ignored() -> None:
    assert resolve_settings(["-v", "positional", "--flag"], {}) == Settings()
