from enum import IntEnum


class Color(IntEnum):
    Blue = 0
    Red = 1

    # blue blocks are accepted into the canonical set, red ones are rejected
    Accepted = 0
    Rejected = 1


class ColoringPolicy:
    """
    Coloring Policy Interface
    """

    def classify(self, dag, candidate: int, reference: int) -> Color:
        """
        Model:
        Decide whether the candidate block joins the blue set.

        Technically:
        The DAG is read-only. The candidate may not be recorded yet; the DAG
        calls this function before it stores the new block. The color is
        fixed at creation and never revisited.
        """
        raise NotImplementedError


class KCluster(ColoringPolicy):
    """
    k-cluster rule relative to the selected parent. The anticone is
    approximated by the future-set difference of candidate and reference.

    Note:
    The DAG classifies a block before recording it. At that point nothing
    references the candidate, its future is the singleton {candidate} and
    the anticone size is always 0. Every block ends up blue, whatever k.
    """

    def __init__(self, k: int = 15):
        if k < 0:
            raise ValueError("k must be non-negative")
        self.k = k

    def anticone_size(self, dag, block: int, reference: int) -> int:
        reach = dag.reachability
        diff = reach.future(dag, block) - reach.future(dag, reference)
        # subtract self; the reference's future never contains a fresh block
        return max(len(diff) - 1, 0)

    def classify(self, dag, candidate: int, reference: int) -> Color:
        if self.anticone_size(dag, candidate, reference) <= self.k:
            return Color.Blue
        return Color.Red
