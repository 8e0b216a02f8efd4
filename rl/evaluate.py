"""
Evaluation script for trained RL agents
"""

import argparse
import time
from typing import Callable, Optional

import numpy as np

from stable_baselines3 import PPO, DQN
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize

from game.survive import SurviveEnv
from rl.configs.survive_config import ENV_CONFIG, GAME_CONFIG, REWARD_CONFIG


def _make_env(render: bool = False) -> SurviveEnv:
    return SurviveEnv(
        render_mode="human" if render else None,
        reward_weights=REWARD_CONFIG,
        game_config=GAME_CONFIG,
        **ENV_CONFIG,
    )


def evaluate_model(
    model_path: str,
    algo: str = "ppo",
    n_episodes: int = 10,
    render: bool = True,
    seed: Optional[int] = None,
    vec_normalize_path: Optional[str] = None,
):
    """
    Evaluate a trained model

    Args:
        model_path: Path to the saved model
        algo: Algorithm used ('ppo' or 'dqn')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for evaluation
        vec_normalize_path: Path to VecNormalize stats (for PPO)
    """
    if algo == "ppo":
        model = PPO.load(model_path)
    elif algo == "dqn":
        model = DQN.load(model_path)
    else:
        raise ValueError(f"Unknown algorithm: {algo}")

    base_env = _make_env(render)
    env = DummyVecEnv([lambda: base_env])

    if vec_normalize_path:
        env = VecNormalize.load(vec_normalize_path, env)
        env.training = False
        env.norm_reward = False

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        if seed is not None:
            env.seed(seed + episode)
        obs = env.reset()

        total_reward = 0.0
        steps = 0
        last_info = {}

        while True:
            action, _ = model.predict(obs, deterministic=True)
            obs, reward, done, info = env.step(action)
            total_reward += reward[0]
            steps += 1
            last_info = info[0]

            if render:
                time.sleep(base_env.dt)

            if done[0]:
                break

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(last_info.get("score", 0))

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, "
              f"Score = {last_info.get('score', 0)}, Wave = {last_info.get('wave', 0)}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)

    print("\n" + "="*50)
    print(f"Evaluation Results ({n_episodes} episodes):")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Mean Score: {np.mean(episode_scores):.0f}")
    print("="*50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_score": np.mean(episode_scores),
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
    }


def evaluate_policy_fn(
    policy: Callable[[SurviveEnv, np.ndarray], int],
    name: str,
    n_episodes: int = 10,
    seed: Optional[int] = None,
):
    """Evaluate a hand-written baseline policy"""
    print(f"Evaluating {name} baseline...")

    env = _make_env()
    episode_rewards = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0

        while not (terminated or truncated):
            obs, reward, terminated, truncated, info = env.step(policy(env, obs))
            total_reward += reward

        episode_rewards.append(total_reward)
        episode_scores.append(info["score"])

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)

    print(f"\n{name} Results ({n_episodes} episodes):")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Score: {np.mean(episode_scores):.0f}")

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_score": np.mean(episode_scores),
    }


def random_policy(env: SurviveEnv, obs: np.ndarray) -> int:
    return int(env.action_space.sample())


def defend_on_sight_policy(env: SurviveEnv, obs: np.ndarray) -> int:
    # obs[3] is the enemy-present flag
    return 1 if obs[3] > 0 else 0


def main():
    parser = argparse.ArgumentParser(description="Evaluate trained RL agent")
    parser.add_argument(
        "model_path",
        type=str,
        help="Path to the trained model",
    )
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=["ppo", "dqn"],
        help="Algorithm used to train the model (default: ppo)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=10,
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Disable rendering",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--vec-normalize",
        type=str,
        default=None,
        help="Path to VecNormalize stats file (for PPO)",
    )
    parser.add_argument(
        "--compare-baselines",
        action="store_true",
        help="Also evaluate random and defend-on-sight policies",
    )

    args = parser.parse_args()

    results = evaluate_model(
        model_path=args.model_path,
        algo=args.algo,
        n_episodes=args.n_episodes,
        render=not args.no_render,
        seed=args.seed,
        vec_normalize_path=args.vec_normalize,
    )

    if args.compare_baselines:
        for name, policy in (("random", random_policy), ("defend-on-sight", defend_on_sight_policy)):
            print("\n")
            baseline = evaluate_policy_fn(policy, name, n_episodes=args.n_episodes, seed=args.seed)
            improvement = results["mean_reward"] - baseline["mean_reward"]
            print(f"Improvement over {name}: {improvement:.2f}")


if __name__ == "__main__":
    main()
