import pytest

from austere.node import SceneNode
from austere.scene import Scene


class Counter(SceneNode):
    def __init__(self, name):
        super().__init__(name)
        self.updates = 0
        self.renders = 0

    def on_update(self):
        self.updates += 1

    def on_render(self):
        self.renders += 1


def test_default_root():
    scene = Scene("main")
    assert scene.name == "main"
    assert scene.root.name == "Root"
    assert not scene.initialized
    assert not scene.active


def test_given_root_is_used():
    root = SceneNode("custom")
    scene = Scene("s", root)
    assert scene.root is root


def test_initialize_and_destroy():
    scene = Scene("s")
    root = scene.root
    scene.initialize()
    assert scene.initialized
    assert root.initialized
    with pytest.raises(RuntimeError):
        scene.initialize()
    scene.destroy()
    assert not scene.initialized
    assert scene.root is None
    assert not root.initialized
    with pytest.raises(RuntimeError):
        scene.destroy()


def test_initialize_without_root_raises():
    scene = Scene("s")
    scene.set_root(None)
    with pytest.raises(RuntimeError):
        scene.initialize()
    assert not scene.initialized


def test_set_root_on_initialized_scene_initializes_node():
    scene = Scene("s")
    scene.initialize()
    node = SceneNode("new")
    scene.set_root(node)
    assert scene.root is node
    assert node.initialized


def test_update_and_render_reach_root():
    root = Counter("r")
    scene = Scene("s", root)
    scene.initialize()
    scene.update()
    scene.render()
    scene.render()
    assert root.updates == 1
    assert root.renders == 2


def test_set_engine_propagates_to_tree():
    scene = Scene("s")
    child = SceneNode("c")
    scene.root.add_child(child)
    engine = object()
    scene.set_engine(engine)
    assert scene.engine is engine
    assert child.engine is engine
    replacement = SceneNode("r")
    scene.set_root(replacement)
    assert replacement.engine is engine