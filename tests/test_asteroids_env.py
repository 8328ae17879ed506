"""
Tests for the Gymnasium wrapper and the evaluation helpers.
"""
import numpy as np
import pytest

from game.asteroids import AsteroidsEnv
from game.asteroids.entities import Asteroid, Bullet
from game.asteroids.renderer import ASTEROID_C, SHIP_C
from rl.evaluate import POLICIES, FIRE, LEFT, RIGHT, aim_policy, evaluate_policy


@pytest.fixture
def env():
    e = AsteroidsEnv(max_steps=50)
    yield e
    e.close()


class TestSpaces:

    def test_reset_obs_in_space(self, env):
        obs, info = env.reset(seed=0)
        assert obs.shape == env.observation_space.shape
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert info["score"] == 0
        assert info["num_asteroids"] == 5

    def test_step_obs_in_space(self, env):
        env.reset(seed=0)
        for action in range(env.action_space.n):
            obs, reward, terminated, truncated, info = env.step(action)
            assert env.observation_space.contains(obs)

    def test_seeded_resets_repeat(self, env):
        a, _ = env.reset(seed=3)
        b, _ = env.reset(seed=3)
        np.testing.assert_array_equal(a, b)


class TestStep:

    def test_fire_action_spawns_bullet(self, env):
        env.reset(seed=0)
        _, _, _, _, info = env.step(4)
        assert info["num_bullets"] == 1

    def test_kill_reward(self, env):
        env.reset(seed=0)
        env.engine.asteroids = [Asteroid(x=100.0, y=100.0, radius=20.0)]
        env.engine.bullets = [Bullet(x=100.0, y=100.0)]
        _, reward, terminated, _, info = env.step(0)
        assert info["score"] == 10
        assert reward == pytest.approx(1.0 - 0.001)
        assert not terminated

    def test_death_terminates(self, env):
        env.reset(seed=0)
        env.engine.asteroids = [Asteroid(x=400.0, y=300.0, radius=20.0)]
        _, reward, terminated, _, info = env.step(0)
        assert terminated
        assert info["game_over"] is True
        assert reward == pytest.approx(-5.0 - 0.001)

    def test_death_penalty_applied_once(self, env):
        env.reset(seed=0)
        env.engine.asteroids = [Asteroid(x=400.0, y=300.0, radius=20.0)]
        env.step(0)
        _, reward, terminated, _, _ = env.step(0)
        assert terminated
        assert reward == pytest.approx(-0.001)

    def test_truncation(self):
        env = AsteroidsEnv(max_steps=3)
        env.reset(seed=0)
        results = [env.step(0) for _ in range(3)]
        assert [r[3] for r in results] == [False, False, True]

    def test_custom_rewards(self):
        env = AsteroidsEnv(rewards={"R_TIME": 0.0})
        env.reset(seed=0)
        _, reward, _, _, _ = env.step(0)
        assert reward == 0.0


class TestRender:

    def test_rgb_array(self):
        env = AsteroidsEnv(render_mode="rgb_array")
        env.reset(seed=0)
        env.step(0)
        frame = env.render()
        assert frame.shape == (600, 800, 3)
        assert frame.any()

    def test_frame_drawn_on_reset(self):
        env = AsteroidsEnv(render_mode="rgb_array")
        env.reset(seed=0)
        frame = env.render()
        assert (frame == ASTEROID_C).all(axis=-1).any()
        assert (frame == SHIP_C).all(axis=-1).any()
        assert env._surface.texts == [("Score: 0", 10, 10)]

    def test_reset_replaces_previous_episode_frame(self):
        env = AsteroidsEnv(render_mode="rgb_array")
        env.reset(seed=0)
        env.engine.asteroids = [Asteroid(x=400.0, y=300.0, radius=20.0)]
        env.step(0)
        assert ("Game Over!", 10, 30) in env._surface.texts

        env.reset(seed=1)
        assert env._surface.texts == [("Score: 0", 10, 10)]

    def test_no_render_mode(self, env):
        env.reset(seed=0)
        env.step(0)
        assert env.render() is None

    def test_unsupported_render_mode(self):
        with pytest.raises(AssertionError):
            AsteroidsEnv(render_mode="human")


class TestPolicies:

    def test_aim_policy_turns_toward_target(self, env):
        env.reset(seed=0)
        env.engine.asteroids = [Asteroid(x=400.0, y=500.0, radius=20.0)]  # straight down
        assert aim_policy(env) == RIGHT
        env.engine.asteroids = [Asteroid(x=400.0, y=100.0, radius=20.0)]  # straight up
        assert aim_policy(env) == LEFT
        env.engine.asteroids = [Asteroid(x=600.0, y=300.0, radius=20.0)]  # dead ahead
        assert aim_policy(env) == FIRE

    def test_evaluate_policy(self):
        results = evaluate_policy("aim", n_episodes=2, seed=1, max_steps=30, verbose=0)
        assert len(results["episode_rewards"]) == 2
        assert all(length <= 30 for length in results["episode_lengths"])


class TestConfig:

    def test_engine_accepts_config(self):
        from game.asteroids import Engine
        from rl.configs.asteroids_config import ENGINE_CONFIG
        eng = Engine(**ENGINE_CONFIG)
        assert len(eng.asteroids) == ENGINE_CONFIG["min_asteroids"]
        assert eng.interval == pytest.approx(1 / 60)

    def test_default_policy_is_registered(self):
        from rl.configs.asteroids_config import EVAL_CONFIG
        assert EVAL_CONFIG["policy"] in POLICIES

    def test_env_accepts_config(self):
        from rl.configs.asteroids_config import ENV_CONFIG
        env = AsteroidsEnv(**ENV_CONFIG)
        obs, _ = env.reset(seed=0)
        assert env.observation_space.contains(obs)
        assert env.engine.asteroid_reward == 10
