"""
Configuration for the asteroids engine and environment
"""

# Engine parameters
ENGINE_CONFIG = {
    "fps": 60,
    "min_asteroids": 5,      # population floor, topped up one per tick
    "asteroid_reward": 10,   # score per destroyed asteroid
    "ship_radius": 20.0,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "R_KILL": 1.0,       # Reward per destroyed asteroid
    "R_DEATH": 5.0,      # Penalty when the ship is hit
    "R_TIME": 0.001,     # Small time penalty
}

# Environment parameters
ENV_CONFIG = {
    "width": 800,
    "height": 600,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_asteroids": 5,
    "max_speed": 10.0,
    "rewards": REWARD_CONFIG,
    "engine_config": ENGINE_CONFIG,
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "policy": "aim",
}
