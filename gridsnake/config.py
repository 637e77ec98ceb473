"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Window & Grid ─────────────────────────────────────────────────
TILES           = 20
CELL            = 20
PANEL_H         = 60
GAME_W, GAME_H  = TILES * CELL, TILES * CELL
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
WIDTH, HEIGHT   = GAME_W + 2 * OFFSET_X, GAME_H + OFFSET_Y + 10
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (26,  26,  46)
GRID_COL    = (15,  52,  96)
HEAD_COL    = (78,  204, 163)
BODY_COL    = (22,  33,  62)
FOOD_COL    = (255, 107, 107)
FOOD_SHINE  = (255, 170, 170)
OBSTACLE_COL = (231, 76,  60)
OBSTACLE_X  = (254, 250, 249)
UI_COL      = (120, 120, 170)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (26,  26,  62)
TEXT_COL    = (230, 230, 240)

# ── Timing ────────────────────────────────────────────────────────
INITIAL_INTERVAL = 150   # ms between ticks at the start of a game
MIN_INTERVAL     = 50    # fastest tick
INTERVAL_STEP    = 5     # ms shaved off per food eaten

# ── Scoring & obstacles ───────────────────────────────────────────
FOOD_SCORE             = 10
OBSTACLE_EVERY         = 50    # one obstacle per multiple of this score
MOVING_OBSTACLES_SCORE = 200
OBSTACLE_MOVE_CHANCE   = 0.2
OBSTACLE_MOVE_ATTEMPTS = 10
SPAWN_ATTEMPTS         = 1000  # rejection-sampling draws before a full scan

# ── Audio ─────────────────────────────────────────────────────────
SAMPLE_RATE = 22050
VOLUME      = 0.3

# ── Persistence ───────────────────────────────────────────────────
HIGH_SCORE_FILE = "gridsnake_scores.json"
HIGH_SCORE_KEY  = "snakeHighScore"

# ── Game States ───────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_RUNNING = "running"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── End reasons ───────────────────────────────────────────────────
END_COLLISION  = "collision"
END_BOARD_FULL = "board_full"

# ── Model events ──────────────────────────────────────────────────
EVENT_FOOD_EATEN = "food_eaten"
EVENT_GAME_OVER  = "game_over"
EVENT_HIGH_SCORE = "high_score"
