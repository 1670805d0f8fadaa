from __future__ import annotations

from statesearch.domains.choice_tree import Dir
from statesearch.search.dfs import dfs, dfs_iter, replay
from statesearch.search.visited import Visited

from conftest import CountingSpace

L, R = Dir.LEFT, Dir.RIGHT


def test_yields_states_in_discovery_order(tree):
    assert list(dfs_iter(tree, 0, [])) == [0, 1, 3, 4, 2]


def test_path_tracks_current_depth(tree):
    path = []
    snapshots = [(s, list(path)) for s in dfs_iter(tree, 0, path)]
    assert snapshots == [
        (0, []),
        (1, [L]),
        (3, [L, L]),
        (4, [L, R]),
        (2, [R]),
    ]
    # fully backtracked once exhausted
    assert path == []


def test_path_matches_batch_search(grid):
    path = []
    for s in dfs_iter(grid, (0, 0), path):
        assert dfs(grid, (0, 0), s) == path
        ok, end = replay(grid, (0, 0), path)
        assert ok and end == s


def test_stopping_early_leaves_path_at_state(tree):
    path = []
    it = dfs_iter(tree, 0, path)
    for s in it:
        if s == 4:
            break
    assert path == [L, R]


def test_self_loop_yields_once(tree):
    assert list(dfs_iter(tree, 2, [])) == [2]


def test_expands_lazily(tree):
    space = CountingSpace(tree)
    it = dfs_iter(space, 0, [])
    assert next(it) == 0
    assert sum(space.calls.values()) == 0
    assert next(it) == 1
    assert space.calls[0] == 1
    assert space.calls[1] == 0


def test_uses_supplied_visited(tree):
    seen = Visited()
    list(dfs_iter(tree, 0, [], visited=seen))
    assert len(seen) == 5
    assert all(s in seen for s in (0, 1, 2, 3, 4))


def test_convenience_method(tree):
    assert list(tree.dfs_iter(1, [])) == [1, 3, 4]
