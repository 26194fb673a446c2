from streetbuds import settings
from streetbuds.collectible import CollectibleKind
from streetbuds.controls import NO_INPUT, InputState
from streetbuds.level import CollectibleSpawn, EnemySpawn
from streetbuds.session import GameState

# Overlaps a player standing at the default spawn (x 100..140, y 390..450).
COIN_AT_SPAWN = CollectibleSpawn(110, 400, 20, 20, CollectibleKind.COIN, 100)
# Walks into the player on the first tick.
ENEMY_AT_SPAWN = EnemySpawn(130, 420)


def airborne_above(session, enemy_x, vel_y=5):
    """Put the player just above the first enemy, falling."""
    player = session.player
    player.pos.update(enemy_x - 5, 365)
    player.sync_rect()
    player.is_jumping = True
    player.vel.y = vel_y


def test_menu_to_playing_starts_music(make_session, level_def, sounds):
    session = make_session(level_def(), start=False)
    assert session.state is GameState.MENU
    session.tick(InputState(right=True))
    assert session.player.rect.x == 100

    session.start()
    assert session.state is GameState.PLAYING
    assert sounds.played == [f"music:{settings.MUSIC_FILE}"]


def test_pause_freezes_everything(make_session, level_def):
    session = make_session(level_def(enemies=(EnemySpawn(500, 420),)))
    session.toggle_pause()
    assert session.state is GameState.PAUSED

    for _ in range(10):
        session.tick(InputState(right=True))
    assert session.player.rect.x == 100
    assert session.level.enemies[0].rect.x == 500
    assert session.ticks_elapsed == 0

    session.toggle_pause()
    session.tick(InputState(right=True))
    assert session.state is GameState.PLAYING
    assert session.player.rect.x == 105
    assert session.level.enemies[0].rect.x == 502


def test_pause_is_ignored_outside_play(make_session, level_def):
    session = make_session(level_def(), start=False)
    session.toggle_pause()
    assert session.state is GameState.MENU


def test_stomp_kills_enemy_scores_and_bounces(make_session, level_def, sounds):
    session = make_session(level_def(enemies=(EnemySpawn(200, 420),)))
    airborne_above(session, 200)

    session.tick(NO_INPUT)

    enemy = session.level.enemies[0]
    assert not enemy.is_alive
    assert session.score == settings.STOMP_SCORE == 100
    assert session.player.vel.y < 0
    assert session.player.health == session.player.max_health
    assert "stomp" in sounds.played


def test_rising_player_does_not_stomp(make_session, level_def):
    session = make_session(level_def(enemies=(EnemySpawn(200, 420),)))
    airborne_above(session, 200, vel_y=-3)
    session.player.pos.y = 380
    session.player.sync_rect()

    session.tick(NO_INPUT)

    assert session.level.enemies[0].is_alive
    assert session.score == 0


def test_side_contact_costs_a_life_and_respawns(make_session, level_def, sounds):
    session = make_session(level_def(enemies=(ENEMY_AT_SPAWN,)))
    session.tick(NO_INPUT)

    assert session.lives == settings.START_LIVES - 1
    assert session.state is GameState.PLAYING
    assert session.player.health == session.player.max_health
    assert session.player.is_invulnerable
    assert sounds.played.count("hurt") == 1

    # Still touching, but protected by the respawn window
    session.tick(NO_INPUT)
    assert session.lives == settings.START_LIVES - 1


def test_stunned_enemy_does_no_damage(make_session, level_def):
    session = make_session(level_def(enemies=(ENEMY_AT_SPAWN,)))
    session.level.enemies[0].take_damage(1, from_above=False)
    session.level.enemies[0].rect.x = 132
    session.tick(NO_INPUT)
    assert session.player.health == session.player.max_health
    assert session.lives == settings.START_LIVES


def test_last_life_ends_game_and_freezes_play(make_session, level_def):
    session = make_session(level_def(enemies=(ENEMY_AT_SPAWN,)))
    session.lives = 1
    session.tick(NO_INPUT)
    assert session.state is GameState.GAME_OVER
    assert session.lives == 0

    pos = session.player.rect.topleft
    elapsed = session.ticks_elapsed
    for _ in range(5):
        session.tick(InputState(right=True))
    assert session.player.rect.topleft == pos
    assert session.ticks_elapsed == elapsed


def test_restart_after_game_over(make_session, level_def):
    session = make_session(level_def(enemies=(ENEMY_AT_SPAWN,)))
    session.lives = 1
    session.score = 300
    session.tick(NO_INPUT)

    session.restart()
    assert session.state is GameState.PLAYING
    assert session.lives == settings.START_LIVES
    assert session.score == 0
    assert all(e.is_alive for e in session.level.enemies)


def test_pickup_scores_once_and_bursts(make_session, level_def, sounds, particles):
    session = make_session(level_def(collectibles=(COIN_AT_SPAWN,)))
    session.tick(NO_INPUT)
    assert session.score == 100
    assert session.level.collectibles[0].collected
    assert len(particles) == settings.PICKUP_PARTICLES
    assert sounds.played.count("pickup") == 1

    session.tick(NO_INPUT)
    assert session.score == 100
    assert sounds.played.count("pickup") == 1


def test_level_completes_on_the_tick_threshold_is_reached(make_session, level_def):
    session = make_session(level_def(collectibles=(COIN_AT_SPAWN,), score_to_complete=100))
    session.tick(NO_INPUT)
    assert session.state is GameState.LEVEL_COMPLETE


def test_continue_moves_to_next_level_and_wraps(make_session, level_def):
    first = level_def(name="One", collectibles=(COIN_AT_SPAWN,), score_to_complete=100)
    second = level_def(name="Two", collectibles=(COIN_AT_SPAWN,), score_to_complete=100)
    session = make_session(first, second)

    session.tick(NO_INPUT)
    session.continue_to_next_level()
    assert session.state is GameState.PLAYING
    assert session.level.name == "Two"
    assert session.score == 0
    assert session.lives == settings.START_LIVES

    session.tick(NO_INPUT)
    session.continue_to_next_level()
    assert session.level.name == "One"
    assert not session.level.collectibles[0].collected


def test_running_out_of_time_costs_a_life(make_session, level_def):
    session = make_session(level_def(time_limit=1))
    assert session.remaining_time() == 1
    for _ in range(settings.FPS - 1):
        session.tick(NO_INPUT)
    assert session.lives == settings.START_LIVES

    session.tick(NO_INPUT)
    assert session.lives == settings.START_LIVES - 1
    assert session.ticks_elapsed == 0


def test_session_runs_without_optional_collaborators(level_def):
    from streetbuds.levels import LevelRegistry
    from streetbuds.session import GameSession

    session = GameSession(LevelRegistry([level_def(collectibles=(COIN_AT_SPAWN,))]))
    session.start()
    session.tick(NO_INPUT)
    assert session.score == 100
