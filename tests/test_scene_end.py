import pygame
import pytest

from starshooter.leaderboard import LeaderBoard
from starshooter.scene_end import SceneEnd
from starshooter.scene_main import SceneMain


class FakeGame:
    def __init__(self):
        self.width = 600
        self.height = 800
        self.assets_dir = "assets"
        self.final_score = 0
        self.leaderboard = LeaderBoard(8)
        self.changed = []
        self.texts = []

    def change_scene(self, scene):
        self.changed.append(scene)

    def render_text_center(self, text, pos_y, is_title):
        self.texts.append(("center", text, pos_y, is_title))
        return (350, 640)

    def render_text_at(self, text, pos_x, pos_y, is_title, is_left=True):
        self.texts.append(("at", text, pos_x, pos_y, is_title, is_left))

    def insert_leaderboard(self, score, name):
        self.leaderboard.insert(score, name)


@pytest.fixture
def video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    yield
    pygame.display.quit()


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def text(value):
    return pygame.event.Event(pygame.TEXTINPUT, text=value)


def test_typed_text_builds_the_name():
    game = FakeGame()
    scene = SceneEnd(game)
    scene.handle_event(text("Ab"))
    scene.handle_event(text("c"))
    scene.render()
    assert scene.name == "Abc"
    assert ("center", "Abc", 0.8, False) in game.texts


def test_backspace_removes_last_character_and_is_safe_when_empty():
    scene = SceneEnd(FakeGame())
    scene.handle_event(text("xy"))
    scene.handle_event(key(pygame.K_BACKSPACE))
    assert scene.name == "x"
    scene.handle_event(key(pygame.K_BACKSPACE))
    scene.handle_event(key(pygame.K_BACKSPACE))
    assert scene.name == ""


def test_name_entry_shows_score_text():
    game = FakeGame()
    game.final_score = 120
    SceneEnd(game).render()
    assert ("center", "your score is : 120", 0.1, False) in game.texts
    assert ("center", "游戏结束", 0.4, True) in game.texts


def test_cursor_blinks_after_name():
    game = FakeGame()
    scene = SceneEnd(game)
    scene.handle_event(text("Zed"))
    scene.update(0.6)
    scene.render()
    assert ("at", "_", 350, 640, False, True) in game.texts


def test_cursor_hidden_at_start_with_empty_name():
    game = FakeGame()
    scene = SceneEnd(game)
    scene.render()
    assert "_" not in [t[1] for t in game.texts]
    scene.update(0.6)
    scene.render()
    assert ("center", "_", 0.8, False) in game.texts


def test_return_with_empty_name_records_default(video):
    game = FakeGame()
    game.final_score = 120
    scene = SceneEnd(game)
    scene.handle_event(key(pygame.K_RETURN))
    assert scene.is_typing is False
    assert game.leaderboard.entries() == [(120, "Player")]


def test_scoreboard_lists_entries(video):
    game = FakeGame()
    game.final_score = 70
    game.leaderboard.insert(90, "ann")
    scene = SceneEnd(game)
    scene.handle_event(text("bob"))
    scene.handle_event(key(pygame.K_RETURN))
    scene.render()
    left = [t[1] for t in game.texts if t[0] == "at" and t[5]]
    right = [t[1] for t in game.texts if t[0] == "at" and not t[5]]
    assert left == ["1.ann", "2.bob"]
    assert right == ["90", "70"]
    assert ("center", "Scoreboard", 0.05, True) in game.texts


def test_j_restarts_only_after_typing(video):
    game = FakeGame()
    scene = SceneEnd(game)
    scene.handle_event(key(pygame.K_j))
    assert game.changed == []
    scene.handle_event(key(pygame.K_RETURN))
    scene.handle_event(key(pygame.K_j))
    assert len(game.changed) == 1
    assert isinstance(game.changed[0], SceneMain)