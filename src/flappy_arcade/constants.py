"""
constants.py: Centralized default tuning for the simulation and the window.
"""

# -------- Display Config --------
TARGET_FPS = 60                 # Simulation ticks once per rendered frame
WINDOW_TITLE = "Flappy Arcade"

# -------- Game World Config --------
SCREEN_WIDTH = 300
SCREEN_HEIGHT = 500
GROUND_HEIGHT = 80              # Floor sits at SCREEN_HEIGHT - GROUND_HEIGHT

# -------- Avatar Config --------
BIRD_WIDTH = 34
BIRD_HEIGHT = 24
FLAP_SPEED = 10                 # Ticks between wing-phase toggles

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.05                  # Added to velocity every tick
JUMP_IMPULSE = -3.5             # Velocity is set, not added, on a flap
START_VELOCITY = -1.0           # Small upward drift when play begins
ROTATION_SCALE = 0.1            # Radians per unit of velocity, clamped to +-pi/4

# -------- Pipe Config --------
PIPE_SPEED = 1.5
PIPE_WIDTH = 50
PIPE_GAP = 180
PIPE_SPACING = 300              # Ticks between spawns
INITIAL_PIPE_DELAY = 120        # Ticks of open sky before the first pipe
PIPE_MARGIN_TOP = 80            # Lowest allowed gap start
PIPE_MARGIN_BOTTOM = 70         # Clearance kept between gap end and the floor
HITBOX_INSET = 4                # Collision forgiveness on every edge

# -------- Render Config --------
SKY_COLOR = (112, 197, 206)
GROUND_COLOR = (222, 216, 149)
GROUND_STRIPE_COLOR = (233, 200, 145)
PIPE_COLOR = (46, 204, 113)
PIPE_LIP_COLOR = (39, 174, 96)
BIRD_COLOR = (241, 196, 15)
WING_COLOR = (243, 156, 18)
BEAK_COLOR = (230, 126, 34)
TEXT_COLOR = (255, 255, 255)
BUTTON_COLOR = (231, 76, 60)
