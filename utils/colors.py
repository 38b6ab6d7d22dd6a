"""
Color palette for Neon Maze
"""

# Background colors
COLOR_BG = (0, 0, 0)              # Main background
COLOR_PANEL_BG = (10, 10, 18)     # HUD panel background

# Maze walls (gradient from neon blue)
COLOR_WALL = (0, 255, 255)
COLOR_WALL_GRADIENT_END = (0, 136, 255)
COLOR_WALL_BORDER = (255, 255, 255)

# Moving walls
COLOR_MOVING_WALL = (255, 0, 0)
COLOR_MOVING_WALL_GRADIENT_END = (255, 68, 68)

# Entity colors
COLOR_PLAYER = (0, 255, 0)        # Neon green
COLOR_FRUIT = (255, 0, 255)       # Neon purple

# UI colors
COLOR_TEXT = (210, 210, 210)
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)
COLOR_TEXT_DIM = (150, 150, 150)
COLOR_OVERLAY = (0, 0, 0, 170)

# Particle effects
COLOR_PARTICLE_PICKUP = (255, 105, 180)   # Neon pink
COLOR_PARTICLE_WIN = (0, 255, 0)          # Neon green
