import logging

import stitchdag
from stitchdag import DAG


def fan(n, **kwargs):
    dag = DAG(**kwargs)
    for _ in range(n):
        dag.insert([0])
    return dag


def test_narrow_frontier():
    dag = fan(10)
    assert len(dag.tips) == 10
    assert stitchdag.maybe_stitch(dag, 10) is None
    assert len(dag) == 11


def test_fragmented_frontier(caplog):
    caplog.set_level(logging.INFO, logger="stitchdag.stitch")

    dag = fan(11)
    before = sorted(dag.tips)
    assert before == list(range(1, 12))

    merge = stitchdag.maybe_stitch(dag, 10)
    assert merge == 12
    assert dag.parents(merge) == tuple(before)
    assert merge in dag.tips
    # the last processed parent is the sole tip left and stays
    assert dag.tips == {11, merge}
    assert dag.selected_parent == merge
    assert dag.past(merge) == set(range(13))
    assert "stitching 11 tips" in caplog.text

    assert dag.maybe_stitch(10) is None


def test_custom_threshold():
    dag = fan(4)
    merge = dag.maybe_stitch(3)
    assert merge is not None
    assert set(dag.parents(merge)) == {1, 2, 3, 4}
