"""Click to Survive - wave defense simulation core and Gymnasium environment"""

from .game import Game
from .survive_env import SurviveEnv, run_random_episode

__all__ = ['Game', 'SurviveEnv', 'run_random_episode']
