import random
from collections import defaultdict

import pytest

from core import Task, TaskTree, build_tree, flatten_tree, flatten_records, NoRootFoundError


def _rows(*pairs):
    return [Task(id=tid, description=f"task {tid}", parent=parent) for tid, parent in pairs]


SCENARIO_A = ((1, None), (2, 1), (3, 1), (4, 2))


def test_flatten_scenario_a():
    elements = flatten_tree(build_tree(_rows(*SCENARIO_A)))
    assert [el.task.id for el in elements] == [1, 2, 4, 3]
    assert [el.depth for el in elements] == [0, 1, 2, 1]
    assert [el.is_last_sibling for el in elements] == [True, False, True, True]


def test_ancestor_ids_and_numbering():
    elements = flatten_records(_rows(*SCENARIO_A))
    assert [el.ancestor_ids for el in elements] == [(), (1,), (1, 2), (1,)]
    assert [el.number for el in elements] == ["1", "1.2", "1.2.4", "1.3"]


def test_payload_has_parent_stripped():
    elements = flatten_records([Task(1, "root", True), Task(2, "child", False, 1)])
    assert elements[1].task == Task(id=2, description="child", complete=False, parent=None)
    assert elements[0].task.complete is True


def test_single_node_tree():
    elements = flatten_tree(TaskTree(id=9, description="alone"))
    assert len(elements) == 1
    assert elements[0].is_last_sibling is True
    assert elements[0].ancestor_ids == ()
    assert elements[0].number == "9"


def test_flatten_is_idempotent():
    tree = build_tree(_rows(*SCENARIO_A))
    assert flatten_tree(tree) == flatten_tree(tree)


def test_flatten_records_propagates_build_errors():
    with pytest.raises(NoRootFoundError):
        flatten_records([])


def _random_rows(seed, size=40):
    rng = random.Random(seed)
    pairs = [(1, None)] + [(i, rng.randint(1, i - 1)) for i in range(2, size + 1)]
    rng.shuffle(pairs)
    return _rows(*pairs)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_preorder_structure(seed):
    rows = _random_rows(seed)
    elements = flatten_records(rows)
    assert len(elements) == len(rows)

    parent_of = {row.id: row.parent for row in rows}
    position = {el.task.id: idx for idx, el in enumerate(elements)}
    for idx, el in enumerate(elements):
        parent = parent_of[el.task.id]
        if parent is None:
            assert idx == 0
            continue
        # the parent precedes the child and the ancestor chain ends with it
        assert position[parent] < idx
        assert el.ancestor_ids[-1] == parent
        assert el.depth == len(el.ancestor_ids)

    for idx in range(len(elements) - 1):
        # a row is either followed by its first child (depth + 1) or not deeper
        assert elements[idx + 1].depth <= elements[idx].depth + 1


@pytest.mark.parametrize("seed", [4, 5])
def test_subtrees_are_contiguous(seed):
    elements = flatten_records(_random_rows(seed))
    for idx, el in enumerate(elements):
        end = idx + 1
        while end < len(elements) and elements[end].depth > el.depth:
            end += 1
        inside = {e.task.id for e in elements[idx + 1:end]}
        descendants = {e.task.id for e in elements if el.task.id in e.ancestor_ids}
        assert inside == descendants


@pytest.mark.parametrize("seed", [6, 7])
def test_exactly_one_last_sibling_per_parent(seed):
    rows = _random_rows(seed)
    elements = flatten_records(rows)
    groups = defaultdict(list)
    for el in elements:
        if el.ancestor_ids:
            groups[el.ancestor_ids[-1]].append(el)
    assert elements[0].is_last_sibling is True
    for parent_id, siblings in groups.items():
        assert sum(1 for el in siblings if el.is_last_sibling) == 1
        # the last sibling is the one seen last in the flat input
        input_order = [row.id for row in rows if row.parent == parent_id]
        last = next(el for el in siblings if el.is_last_sibling)
        assert last.task.id == input_order[-1]
