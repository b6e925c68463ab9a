import pygame
import pytest

from starshooter.leaderboard import LeaderBoard
from starshooter.scene_end import SceneEnd
from starshooter.scene_main import SceneMain
from starshooter.scene_title import SceneTitle
from starshooter.world import World


class FakeGame:
    def __init__(self):
        self.width = 600
        self.height = 800
        self.assets_dir = "assets"
        self.final_score = 0
        self.leaderboard = LeaderBoard(8)
        self.changed = []
        self.screen = None

    def change_scene(self, scene):
        self.changed.append(scene)


class NoSpawnRandom:
    def random(self):
        return 0.99


@pytest.fixture
def video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    yield
    pygame.display.quit()


def dying_scene():
    game = FakeGame()
    scene = SceneMain(game)
    scene.world = World(game.width, game.height, rng=NoSpawnRandom())
    scene.world.score = 40
    scene.world.player.current_health = 0
    return game, scene


def test_new_scene_world_matches_window():
    game = FakeGame()
    scene = SceneMain(game)
    assert (scene.world.width, scene.world.height) == (game.width, game.height)
    assert scene.world.is_dead is False


def test_escape_returns_to_title():
    game = FakeGame()
    SceneMain(game).handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert len(game.changed) == 1
    assert isinstance(game.changed[0], SceneTitle)


def test_other_keys_do_not_change_scene():
    game = FakeGame()
    SceneMain(game).handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    assert game.changed == []


def test_death_records_final_score(video):
    game, scene = dying_scene()
    scene.update(0.5)
    assert scene.world.is_dead is True
    assert game.final_score == 40


def test_final_score_frozen_after_death(video):
    game, scene = dying_scene()
    scene.update(0.5)
    scene.world.score = 99
    scene.update(0.5)
    assert game.final_score == 40


def test_end_scene_follows_after_delay(video):
    game, scene = dying_scene()
    scene.update(2.0)
    assert game.changed == []
    scene.update(2.0)
    assert len(game.changed) == 1
    assert isinstance(game.changed[0], SceneEnd)


def test_living_player_keeps_scene(video):
    game = FakeGame()
    scene = SceneMain(game)
    scene.world = World(game.width, game.height, rng=NoSpawnRandom())
    for _ in range(10):
        scene.update(1.0)
    assert game.changed == []
    assert scene.time_end == 0.0