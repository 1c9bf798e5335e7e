import gymnasium
import gymnasium.utils.env_checker
import numpy as np
import pytest

import stitchdag  # noqa: F401
from stitchdag.envs import Simulation


def run_episode(env, policy):
    obs, info = env.reset(seed=42)
    total = 0.0
    done = False
    while not done:
        obs, rew, terminated, truncated, info = env.step(
            env.unwrapped.policy(obs, policy)
        )
        total += rew
        done = terminated or truncated
    return obs, total, info


def test_check_env():
    env = gymnasium.make("stitchdag/Simulation-v0", episode_len=20)
    gymnasium.utils.env_checker.check_env(env.unwrapped, skip_render_check=True)


def test_reset():
    env = Simulation()
    obs, info = env.reset(seed=1)
    assert np.array_equal(obs, [1.0, 1.0, 1.0, 0.0])
    assert info == dict(stitched=None, tips=1, selected_parent=0)


@pytest.mark.parametrize("policy", ["honest", "single"])
def test_episode(policy):
    env = gymnasium.make("stitchdag/Simulation-v0", episode_len=30)
    obs, total, info = run_episode(env, policy)
    # every block is blue
    assert total == 30.0
    assert obs[3] == 0.0
    assert obs[0] >= 31.0


def test_child_index_episode():
    env = Simulation(episode_len=25, reachability="child_index")
    obs, total, info = run_episode(env, "honest")
    assert total == 25.0


def test_render():
    env = Simulation(render_mode="ansi")
    env.reset(seed=0)
    env.step(0)
    txt = env.render()
    assert txt.splitlines()[0] == "=== DAG State ==="
    assert "B Block 1 | Parents: [0] | Past size: 2" in txt


def test_policies():
    env = Simulation()
    assert set(env.policies()) == {"honest", "single"}
    obs, _ = env.reset(seed=0)
    assert env.policy(obs, "honest") == 0
    assert env.policy(obs, "single") == 0
    with pytest.raises(ValueError):
        env.policy(obs, "selfish")


def test_bad_arguments():
    with pytest.raises(ValueError):
        Simulation(max_parents=0)
    with pytest.raises(ValueError):
        Simulation(stitch_interval=0)


def test_render_without_mode(capsys):
    env = Simulation()
    env.reset(seed=0)
    env.step(0)
    assert env.render() is None
    assert capsys.readouterr().out == ""
