from stitchdag import Color, ColoringPolicy, DAG
from stitchdag.selection import lowest_id, select_parent


class AllRed(ColoringPolicy):
    def classify(self, dag, candidate, reference):
        return Color.Red


def test_heaviest_tip():
    dag = DAG()
    a = dag.insert([0])
    b = dag.insert([a])
    c = dag.insert([0])
    assert dag.tips == {b, c}
    assert select_parent(dag) == b


def test_default_tie_break():
    dag = DAG()
    a = dag.insert([0])
    b = dag.insert([0])
    assert dag.tips == {a, b}
    assert dag.selected_parent == b


def test_injected_tie_break():
    dag = DAG(tie_break=lowest_id)
    a = dag.insert([0])
    dag.insert([0])
    assert dag.selected_parent == a
    assert select_parent(dag, key=lambda x: x) != a


def test_no_blue_tip():
    dag = DAG(policy=AllRed())
    a = dag.insert([0])
    assert dag.selected_parent == 0
    dag.insert([a])
    dag.insert([0])
    assert all(dag.color(t) == Color.Red for t in dag.tips)
    assert select_parent(dag) is None
    # pointer is kept, genesis stays blue
    assert dag.selected_parent == 0
    assert dag.color(dag.selected_parent) == Color.Blue
