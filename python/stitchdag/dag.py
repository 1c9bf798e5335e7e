from dataclasses import dataclass
from typing import Optional
import logging
import threading
import warnings

from .coloring import Color, ColoringPolicy, KCluster
from .errors import InvalidParents, UnknownBlock
from .reachability import FullScan, Reachability
from .selection import select_parent
from . import stitch
from .tips import update_tips

log = logging.getLogger(__name__)

# ## BLOCK DAG


@dataclass(frozen=True)
class Block:
    id: int
    parents: tuple[int, ...]
    color: Color


class DAG:
    """
    In-memory block DAG. Owns all blocks, the tip set, the id counter and
    the selected parent.

    Blocks are colored once, on insertion, and never change afterwards.
    Mutations and queries hold an internal lock, so at most one insertion
    is in flight at any time.
    """

    def __init__(
        self,
        k: int = 15,
        *,
        policy: Optional[ColoringPolicy] = None,
        reachability: Optional[Reachability] = None,
        tie_break=None,
    ):
        self.policy = KCluster(k) if policy is None else policy
        self.reachability = FullScan() if reachability is None else reachability
        self.tie_break = tie_break

        self._lock = threading.RLock()

        genesis = Block(id=0, parents=(), color=Color.Blue)
        self._blocks = {genesis.id: genesis}
        self.reachability.on_insert(genesis)

        self._tips = {genesis.id}
        self._next_id = 1
        self._selected_parent = genesis.id

    @property
    def genesis(self) -> int:
        return 0

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, block) -> bool:
        return block in self._blocks

    def _check(self, block: int) -> None:
        if block not in self._blocks:
            raise UnknownBlock(block)

    def block(self, block: int) -> Block:
        with self._lock:
            self._check(block)
            return self._blocks[block]

    def color(self, block: int) -> Color:
        return self.block(block).color

    def parents(self, block: int) -> tuple[int, ...]:
        return self.block(block).parents

    def blocks(self) -> list[int]:
        with self._lock:
            return sorted(self._blocks)

    def counts(self) -> dict[Color, int]:
        acc = {Color.Blue: 0, Color.Red: 0}
        with self._lock:
            for b in self._blocks.values():
                acc[b.color] += 1
        return acc

    @property
    def tips(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._tips)

    @property
    def selected_parent(self) -> int:
        return self._selected_parent

    def past(self, block: int) -> set[int]:
        with self._lock:
            self._check(block)
            return self.reachability.past(self, block)

    def future(self, block: int) -> set[int]:
        with self._lock:
            self._check(block)
            return self.reachability.future(self, block)

    def anticone(self, block: int) -> set[int]:
        with self._lock:
            self._check(block)
            return self.reachability.anticone(self, block)

    def _validate(self, parents) -> tuple[int, ...]:
        parents = tuple(parents)
        if len(parents) == 0:
            raise InvalidParents("a block needs at least one parent")

        for p in parents:
            self._check(p)

        distinct = tuple(dict.fromkeys(parents))
        if len(distinct) != len(parents):
            warnings.warn(
                f"duplicate parents {list(parents)}; using {list(distinct)}",
                stacklevel=3,
            )
        return distinct

    def insert(self, parents) -> int:
        with self._lock:
            # validate before touching any state
            parents = self._validate(parents)

            b = self._next_id
            color = self.policy.classify(self, b, self._selected_parent)

            block = Block(id=b, parents=parents, color=color)
            self._next_id += 1
            self._blocks[b] = block
            self.reachability.on_insert(block)

            update_tips(self._tips, b, parents)
            self._update_selected_parent()

            log.debug(
                f"block {b} parents={list(parents)} color={color.name} "
                f"tips={len(self._tips)} selected_parent={self._selected_parent}"
            )
            return b

    def _update_selected_parent(self) -> None:
        best = select_parent(self, key=self.tie_break)
        if best is not None:
            self._selected_parent = best

    def maybe_stitch(self, threshold: int = 10) -> Optional[int]:
        return stitch.maybe_stitch(self, threshold)


# ## Library API


def create_dag(k: int = 15, **kwargs) -> DAG:
    return DAG(k, **kwargs)


def insert_block(dag: DAG, parents) -> int:
    return dag.insert(parents)


def tips(dag: DAG) -> frozenset[int]:
    return dag.tips


def selected_parent(dag: DAG) -> int:
    return dag.selected_parent


def past_set(dag: DAG, block: int) -> set[int]:
    return dag.past(block)


def future_set(dag: DAG, block: int) -> set[int]:
    return dag.future(block)


def maybe_stitch(dag: DAG, threshold: int = 10) -> Optional[int]:
    return dag.maybe_stitch(threshold)
