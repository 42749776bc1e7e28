import math

import hypothesis
import pytest
from hypothesis import strategies as st

from redblack import DuplicateKeyError, KeyNotFoundError, RedBlackTree

_keys = st.lists(st.integers(min_value=-1000, max_value=1000), unique=True, max_size=200)


def _check_height(tree: RedBlackTree):
    n = len(tree)
    if n:
        assert tree.height(tree.root) + 1 <= 2 * math.log2(n + 1)


@hypothesis.settings(deadline=None)
@hypothesis.given(keys=_keys)
def test_invariants_hold_after_every_insert(keys):
    tree = RedBlackTree()
    for key in keys:
        tree.insert(key)
        tree.validate()
    _check_height(tree)
    assert list(tree) == sorted(keys)


@hypothesis.settings(deadline=None)
@hypothesis.given(data=st.data(), keys=_keys)
def test_delete_leaves_sorted_survivors(data, keys):
    tree = RedBlackTree()
    for key in keys:
        tree.insert(key)

    removed = data.draw(st.permutations(keys)).copy()
    removed = removed[:data.draw(st.integers(min_value=0, max_value=len(keys)))]
    for key in removed:
        tree.delete(key)
        tree.validate()
        _check_height(tree)

    assert list(tree) == sorted(set(keys) - set(removed))
    assert len(tree) == len(keys) - len(removed)


@hypothesis.settings(deadline=None)
@hypothesis.given(data=st.data(), keys=_keys.filter(bool))
def test_delete_then_reinsert(data, keys):
    tree = RedBlackTree()
    for key in keys:
        tree.insert(key)
    key = data.draw(st.sampled_from(keys))

    tree.delete(key)
    assert key not in tree
    tree.insert(key)

    tree.validate()
    assert list(tree) == sorted(keys)


@hypothesis.settings(max_examples=50, deadline=None)
@hypothesis.given(data=st.data(), keys=_keys.filter(bool))
def test_failed_operations_leave_tree_unchanged(data, keys):
    tree = RedBlackTree()
    for key in keys:
        tree.insert(key)
    before = tree.dump()

    with pytest.raises(DuplicateKeyError):
        tree.insert(data.draw(st.sampled_from(keys)))
    with pytest.raises(KeyNotFoundError):
        tree.delete(data.draw(st.integers().filter(lambda k: k not in keys)))

    assert tree.dump() == before
    assert len(tree) == len(keys)
