# settings.py
# Central place for constants so the game feel can be tweaked safely.
# Everything here is tuned for a fixed 60 Hz tick: speeds are pixels per tick,
# durations are counted in ticks.

# Window / render
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FPS = 60
TICK_SECONDS = 1.0 / FPS
MAX_FRAME_TIME = 0.25     # seconds; clamp if debugging causes huge dt
TITLE = "Street Buds"

# World bounds
WORLD_WIDTH = 800         # enemies turn around at 0 and WORLD_WIDTH
FLOOR_CLAMP_Y = 400       # player y is never allowed below this

# Player physics (per tick)
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 60
GRAVITY = 1
JUMP_SPEED = -15          # negative is up
MOVE_SPEED = 5
STOMP_BOUNCE_SPEED = JUMP_SPEED

# Player health
PLAYER_MAX_HEALTH = 100
INVULNERABILITY_TICKS = 2 * FPS

# Enemies
STUN_TICKS = 1 * FPS

# Pickups
HEALTH_PICKUP_HEAL = 50
POWER_UP_INVULNERABILITY_TICKS = 5 * FPS

# Scoring / session
START_LIVES = 3
STOMP_SCORE = 100
DEFAULT_TIME_LIMIT = 300          # seconds
DEFAULT_SCORE_TO_COMPLETE = 1000

# Particles
PICKUP_PARTICLES = 20
PARTICLE_GRAVITY = 0.1
PARTICLE_SHRINK = 0.99

# Audio
MUSIC_VOLUME = 0.25
SFX_VOLUME = 0.45
SOUND_OFF = False
VOLUME_STEP = 0.1
MUSIC_FILE = "music.wav"
SOUND_FILES = {
    "stomp": "stomp.wav",
    "pickup": "pickup.wav",
    "hurt": "hurt.wav",
}

# Colours
BACKGROUND_COLOR = (0, 0, 0)
TEXT_COLOR = (240, 240, 240)
PLAYER_COLOR = (0, 0, 255)
PLAYER_DETAIL_COLOR = (255, 255, 255)
ATTACK_HALO_COLOR = (255, 255, 0, 128)
HEALTH_BAR_BG = (255, 0, 0)
HEALTH_BAR_FG = (0, 255, 0)
PLATFORM_COLOR = (139, 69, 19)
ENEMY_STUNNED_COLOR = (128, 128, 128)
PARTICLE_COLOR = (255, 255, 0)
