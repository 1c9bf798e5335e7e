"""
Reachability over the block DAG.

Both closures are reflexive: past(b) and future(b) contain b itself. The
providers do not check whether b is known; the DAG does that at its public
boundary. A block that is not (yet) recorded has an empty neighbourhood, so
its future is {b}.
"""


class Reachability:
    """
    Reachability Provider Interface
    """

    def on_insert(self, block):
        """
        Called by the DAG after a block has been recorded. Providers that
        maintain indexes update them here.
        """
        pass

    def children(self, dag, b: int) -> set[int]:
        raise NotImplementedError

    def parents(self, dag, b: int) -> set[int]:
        if b in dag._blocks:
            return set(dag._blocks[b].parents)
        return set()

    def _closure(self, relation, dag, b: int) -> set[int]:
        acc = {b}
        stack = [b]
        while len(stack) > 0:
            current = stack.pop()
            for x in relation(dag, current):
                if x not in acc:
                    acc.add(x)
                    stack.append(x)
        return acc

    def past(self, dag, b: int) -> set[int]:
        return self._closure(self.parents, dag, b)

    def future(self, dag, b: int) -> set[int]:
        return self._closure(self.children, dag, b)

    def anticone(self, dag, b: int) -> set[int]:
        return set(dag._blocks) - self.past(dag, b) - self.future(dag, b)


class FullScan(Reachability):
    """
    No child index; each step of the forward traversal scans all recorded
    blocks for the ones naming the current block as parent.
    """

    def children(self, dag, b: int) -> set[int]:
        return {c for c, block in dag._blocks.items() if b in block.parents}


class ChildIndex(Reachability):
    """
    Maintains the inverse of the parent relation, like cpr's DAG does with
    its _children adjacency list. An index belongs to exactly one DAG.
    """

    def __init__(self):
        self._children = dict()

    def on_insert(self, block):
        if len(block.parents) == 0 and len(self._children) > 0:
            raise ValueError("child index already in use by another DAG")

        self._children.setdefault(block.id, set())
        for p in block.parents:
            self._children.setdefault(p, set()).add(block.id)

    def children(self, dag, b: int) -> set[int]:
        return self._children.get(b, set()).copy()


providers = dict(full_scan=FullScan, child_index=ChildIndex)


def provider(name: str) -> Reachability:
    try:
        return providers[name]()
    except KeyError:
        raise ValueError(
            f"{name} is not a valid reachability provider; choose from "
            + ", ".join(providers.keys())
        )
