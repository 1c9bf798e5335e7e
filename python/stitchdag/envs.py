import gymnasium
import numpy as np

from .coloring import Color
from .dag import DAG
from .reachability import provider
from .render import describe


class Simulation(gymnasium.Env):
    """
    Randomized block production on top of the DAG.

    Each step appends one block referencing `action + 1` tips, sampled
    uniformly without replacement. Every `stitch_interval` steps the
    fragmentation check runs with `stitch_threshold`.

    Observation: [blocks, tips, past size of selected parent, red blocks]
    Reward: 1 if the appended block is blue, 0 otherwise.
    """

    metadata = {"render_modes": ["ansi", "human"]}

    def __init__(
        self,
        k=15,
        stitch_threshold=10,
        stitch_interval=5,
        max_parents=3,
        episode_len=100,
        reachability="full_scan",
        render_mode=None,
    ):
        if max_parents < 1:
            raise ValueError("max_parents must be at least 1")
        if stitch_interval < 1:
            raise ValueError("stitch_interval must be at least 1")

        self.k = k
        self.stitch_threshold = stitch_threshold
        self.stitch_interval = stitch_interval
        self.max_parents = max_parents
        self.episode_len = episode_len
        self.reachability = reachability
        self.render_mode = render_mode

        self.action_space = gymnasium.spaces.Discrete(max_parents)
        self.observation_space = gymnasium.spaces.Box(
            shape=(4,), low=0.0, high=np.inf, dtype=np.float64
        )

        self.dag = None
        self.steps = 0

    def _obs(self):
        dag = self.dag
        return np.array(
            [
                len(dag),
                len(dag.tips),
                len(dag.past(dag.selected_parent)),
                dag.counts()[Color.Red],
            ],
            dtype=np.float64,
        )

    def _info(self, stitched=None):
        return dict(
            stitched=stitched,
            tips=len(self.dag.tips),
            selected_parent=self.dag.selected_parent,
        )

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)
        self.dag = DAG(self.k, reachability=provider(self.reachability))
        self.steps = 0
        return self._obs(), self._info()

    def step(self, action):
        n = min(int(action) + 1, len(self.dag.tips))
        tips = sorted(self.dag.tips)
        parents = self.np_random.choice(tips, size=n, replace=False)
        b = self.dag.insert(int(p) for p in parents)
        self.steps += 1

        stitched = None
        if self.steps % self.stitch_interval == 0:
            stitched = self.dag.maybe_stitch(self.stitch_threshold)

        reward = 1.0 if self.dag.color(b) == Color.Blue else 0.0
        truncated = self.steps >= self.episode_len
        return self._obs(), reward, False, truncated, self._info(stitched)

    def render(self):
        if self.render_mode is None:
            return None

        txt = describe(self.dag)
        if self.render_mode == "ansi":
            return txt
        print(txt)

    def policies(self):
        return policies.keys()

    def policy(self, obs, name="honest"):
        try:
            return policies[name](self, obs)
        except KeyError:
            raise ValueError(
                name + " is not a valid policy; choose from " + ", ".join(policies)
            )


def honest(env, obs):
    # obs[1] is the number of tips
    return min(int(obs[1]), env.max_parents) - 1


def single(env, obs):
    return 0


policies = dict(honest=honest, single=single)
