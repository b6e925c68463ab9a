import pytest

from starshooter.scene import Scene

_ABSTRACT = {"init", "update", "render", "clean", "handle_event"}


def _complete_methods():
    def init(self):
        self.started = True

    def update(self, delta_time):
        self.last_delta = delta_time

    def render(self):
        self.rendered = True

    def clean(self):
        self.cleaned = True

    def handle_event(self, event):
        self.last_event = event

    return {
        "init": init,
        "update": update,
        "render": render,
        "clean": clean,
        "handle_event": handle_event,
    }


def _bare_complete_scene():
    complete = type("CompleteScene", (Scene,), _complete_methods())
    return complete.__new__(complete)


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene(object())


def test_scene_declares_every_hook_abstract():
    assert set(Scene.__abstractmethods__) == _ABSTRACT
    with pytest.raises(TypeError) as info:
        Scene(object())
    message = str(info.value)
    for hook in _ABSTRACT:
        assert hook in message


def test_partial_subclass_cannot_be_created():
    partial = type("PartialScene", (Scene,), {"init": lambda self: None})
    assert set(partial.__abstractmethods__) == _ABSTRACT - {"init"}
    with pytest.raises(TypeError):
        partial(object())
    rest = {name: body for name, body in _complete_methods().items() if name != "init"}
    finished = type("FinishedScene", (partial,), rest)
    scene = finished.__new__(finished)
    game = object()
    Scene.__init__(scene, game)
    assert scene.game is game


def test_concrete_scene_keeps_its_game():
    scene = _bare_complete_scene()
    first = object()
    second = object()
    Scene.__init__(scene, first)
    assert scene.game is first
    Scene.__init__(scene, second)
    assert scene.game is second


def test_scene_init_stores_game_on_instance():
    scene = _bare_complete_scene()
    game = object()
    Scene.__init__(scene, game)
    assert scene.game is game


def test_concrete_scene_methods_run():
    scene = _bare_complete_scene()
    game = object()
    Scene.__init__(scene, game)
    scene.init()
    scene.update(0.25)
    scene.handle_event("key")
    assert scene.started is True
    assert scene.last_delta == 0.25
    assert scene.last_event == "key"
    assert scene.game is game