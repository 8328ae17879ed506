"""
Evaluation script for scripted policies in the asteroids environment
"""

import argparse
import math
from typing import Optional

import numpy as np

from game.asteroids import AsteroidsEnv
from game.asteroids.asteroids_env import ACTION_KEYS
from rl.configs.asteroids_config import ENV_CONFIG, EVAL_CONFIG

NOOP, LEFT, RIGHT, THRUST, FIRE = range(len(ACTION_KEYS))
AIM_TOLERANCE = 0.1


def random_policy(env: AsteroidsEnv) -> int:
    return int(env.action_space.sample())


def aim_policy(env: AsteroidsEnv) -> int:
    """Turn toward the nearest asteroid and fire once lined up"""
    ship = env.engine.ship
    if not env.engine.asteroids:
        return NOOP

    target = min(env.engine.asteroids,
                 key=lambda a: (a.x - ship.x) ** 2 + (a.y - ship.y) ** 2)
    bearing = math.atan2(target.y - ship.y, target.x - ship.x)
    # Signed heading error in (-pi, pi]
    error = math.atan2(math.sin(bearing - ship.rotation), math.cos(bearing - ship.rotation))

    if abs(error) <= AIM_TOLERANCE:
        return FIRE
    return RIGHT if error > 0 else LEFT


POLICIES = {
    "random": random_policy,
    "aim": aim_policy,
}


def evaluate_policy(
    policy: str = "random",
    n_episodes: int = 10,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
    verbose: int = 1,
):
    """
    Run a scripted policy for several episodes

    Args:
        policy: Policy name ('random' or 'aim')
        n_episodes: Number of episodes to run
        seed: Base seed; episode i uses seed + i
        max_steps: Override the episode step limit
        verbose: Print per-episode results when > 0
    """
    env_config = dict(ENV_CONFIG)
    if max_steps is not None:
        env_config["max_steps"] = max_steps
    env = AsteroidsEnv(**env_config)
    act = POLICIES[policy]

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)
        env.action_space.seed(seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0

        while not (terminated or truncated):
            obs, reward, terminated, truncated, info = env.step(act(env))
            total_reward += reward

        episode_rewards.append(total_reward)
        episode_lengths.append(info["step"])
        episode_scores.append(info["score"])

        if verbose > 0:
            print(f"Episode {episode + 1}/{n_episodes}: "
                  f"Reward = {total_reward:.2f}, Score = {info['score']}, Length = {info['step']}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    mean_score = np.mean(episode_scores)

    if verbose > 0:
        print("\n" + "=" * 50)
        print(f"{policy} policy results ({n_episodes} episodes):")
        print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
        print(f"Mean Score: {mean_score:.1f}")
        print(f"Mean Episode Length: {mean_length:.1f}")
        print("=" * 50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_score": mean_score,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate scripted asteroids policies")
    parser.add_argument(
        "--policy",
        type=str,
        default=EVAL_CONFIG["policy"],
        choices=list(POLICIES),
        help="Policy to evaluate (default: aim)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Override the episode step limit",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate the random policy for comparison",
    )

    args = parser.parse_args()

    results = evaluate_policy(
        policy=args.policy,
        n_episodes=args.n_episodes,
        seed=args.seed,
        max_steps=args.max_steps,
    )

    if args.compare_random and args.policy != "random":
        print("\n")
        random_results = evaluate_policy(
            policy="random",
            n_episodes=args.n_episodes,
            seed=args.seed,
            max_steps=args.max_steps,
        )
        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")


if __name__ == "__main__":
    main()
