"""
Training configuration for the survive environment
"""

# Core gameplay parameters (Game constructor; the env supplies the viewport)
GAME_CONFIG = {
    "collision_radius": 60.0,
    "contact_damage": 10,
    "defend_score": 100,
    "max_combo": 8,
    "next_wave_delay": 1.5,
    "particle_interval": 0.016,
    "max_particles": 100,
    "burst_size": 20,
    "spawn_offset": 50.0,
}

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training
    "width": 800,
    "height": 600,
    "dt": 1/60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "auto_advance": True,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "R_SCORE": 0.01,        # Reward per point scored
    "R_BREACH": 1.0,        # Penalty per enemy reaching the center
    "R_DEFEND_MISS": 0.05,  # Penalty for defending with no enemy on screen
    "R_DEATH": 5.0,         # Death penalty
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}
