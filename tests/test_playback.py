"""
Tests for the timed replay of a search result.
"""

from pathviz.core.playback import PATH_DELAY_MS, VISIT_DELAY_MS, Playback
from pathviz.core.runner import run_algorithm
from pathviz.core.types import EMPTY, END, PATH, START, VISITED, WALL, SearchResult


def test_frame_schedule(open_3x3) -> None:
    result = run_algorithm("dijkstra", open_3x3)
    pb = Playback.from_result(result)
    n_visited = len(result.visited_order)
    assert [f.at_ms for f in pb.frames[:n_visited]] == [VISIT_DELAY_MS * i for i in range(n_visited)]
    path_frames = pb.frames[n_visited:]
    assert [f.kind for f in path_frames] == [PATH] * 3
    assert path_frames[0].at_ms == VISIT_DELAY_MS * n_visited
    assert pb.total_ms == VISIT_DELAY_MS * n_visited + PATH_DELAY_MS * 3


def test_no_path_schedule() -> None:
    pb = Playback.from_result(SearchResult([], None))
    assert pb.frames == []
    assert pb.total_ms == 0
    assert pb.done


def test_advance_paints_due_frames_only(open_3x3) -> None:
    result = run_algorithm("dijkstra", open_3x3)   # visits (0,0) (1,1) (2,0) (0,1)
    pb = Playback.from_result(result)
    assert pb.advance(open_3x3, 0) == 1
    assert open_3x3.at(0, 0).kind == VISITED
    assert open_3x3.at(1, 1).kind == EMPTY
    assert pb.advance(open_3x3, VISIT_DELAY_MS) == 1
    assert open_3x3.at(1, 1).kind == VISITED
    assert not pb.done


def test_finish_paints_path_and_keeps_markers(open_3x3) -> None:
    result = run_algorithm("astar", open_3x3)
    pb = Playback.from_result(result)
    pb.finish(open_3x3)
    assert pb.done
    assert pb.progress == 1.0
    assert open_3x3.at(1, 1).kind == PATH
    assert open_3x3.at(1, 0).kind == START
    assert open_3x3.at(1, 2).kind == END


def test_walls_painted_during_replay_survive(open_3x3) -> None:
    result = run_algorithm("dijkstra", open_3x3)
    open_3x3.at(0, 1).kind = WALL
    Playback.from_result(result).finish(open_3x3)
    assert open_3x3.at(0, 1).kind == WALL


def test_speed_scales_the_clock(open_3x3) -> None:
    result = run_algorithm("dijkstra", open_3x3)
    pb = Playback.from_result(result, speed=2.0)
    pb.advance(open_3x3, VISIT_DELAY_MS)
    assert pb.elapsed_ms == 2 * VISIT_DELAY_MS
    assert open_3x3.at(2, 0).kind == VISITED


def test_cancel_drops_pending_frames(open_3x3) -> None:
    result = run_algorithm("dijkstra", open_3x3)
    pb = Playback.from_result(result)
    pb.advance(open_3x3, 0)
    pb.cancel()
    assert pb.done
    assert pb.advance(open_3x3, 10_000) == 0
    assert open_3x3.at(0, 0).kind == VISITED
    assert open_3x3.at(1, 1).kind == EMPTY
    open_3x3.clear_path()
    assert open_3x3.at(0, 0).kind == EMPTY
