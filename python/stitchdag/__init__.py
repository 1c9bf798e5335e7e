import importlib.metadata

from gymnasium.envs.registration import register

from .coloring import Color, ColoringPolicy, KCluster
from .dag import (
    Block,
    DAG,
    create_dag,
    future_set,
    insert_block,
    maybe_stitch,
    past_set,
    selected_parent,
    tips,
)
from .errors import DagError, InvalidParents, UnknownBlock
from .reachability import ChildIndex, FullScan, Reachability

package = "stitchdag"

try:
    __version__ = "v" + importlib.metadata.version(package)
except importlib.metadata.PackageNotFoundError:
    __version__ = "v0.0.0+notinstalled"

register(id="stitchdag/Simulation-v0", entry_point="stitchdag.envs:Simulation")
