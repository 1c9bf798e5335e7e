from typing import Callable, Optional

from .coloring import Color


def select_parent(dag, key: Optional[Callable[[int], object]] = None) -> Optional[int]:
    """
    Pick the blue tip with the largest past. Ties are broken by `key`
    applied to the block id, larger wins. By default this is the id itself,
    i.e. the youngest among the heaviest tips.

    Returns None if no tip is blue.
    """
    if key is None:
        key = _identity

    candidates = [t for t in dag._tips if dag._blocks[t].color == Color.Blue]
    if len(candidates) == 0:
        return None

    def weight(t):
        return (len(dag.reachability.past(dag, t)), key(t))

    return max(candidates, key=weight)


def _identity(b):
    return b


def lowest_id(b):
    return -b
