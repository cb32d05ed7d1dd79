import pytest

from austere.node import SceneNode


class Recorder(SceneNode):
    def __init__(self, name, events, fail=False):
        super().__init__(name)
        self.events = events
        self.fail = fail

    def on_initialize(self):
        self.events.append(("init", self.name))
        if self.fail:
            raise RuntimeError("boom")

    def on_destroy(self):
        self.events.append(("destroy", self.name))

    def on_update(self):
        self.events.append(("update", self.name))

    def on_render(self):
        self.events.append(("render", self.name))


def test_add_child_links_parent_and_transform():
    parent = SceneNode("parent")
    child = SceneNode("child")
    parent.add_child(child)
    assert child.parent is parent
    assert child.transform.parent is parent.transform
    assert parent.has_child("child")
    assert parent.has_child(child)
    assert parent.child("child") is child


def test_add_child_errors():
    node = SceneNode("n")
    with pytest.raises(ValueError):
        node.add_child(None)
    with pytest.raises(ValueError):
        node.add_child(node)
    node.add_child(SceneNode("c"))
    with pytest.raises(ValueError):
        node.add_child(SceneNode("c"))
    assert len(node) == 1


def test_remove_child_by_name_and_node():
    parent = SceneNode("p")
    a, b = SceneNode("a"), SceneNode("b")
    parent.add_child(a)
    parent.add_child(b)
    parent.remove_child("a")
    assert a.parent is None
    assert a.transform.parent is None
    parent.remove_child(b)
    assert len(parent) == 0
    with pytest.raises(KeyError):
        parent.remove_child("a")


def test_remove_child_requires_same_node():
    parent = SceneNode("p")
    parent.add_child(SceneNode("a"))
    with pytest.raises(KeyError):
        parent.remove_child(SceneNode("a"))
    with pytest.raises(ValueError):
        parent.remove_child(None)
    assert parent.has_child("a")
    assert not parent.has_child(SceneNode("a"))


def test_initialize_order_and_children_sorted():
    events = []
    root = Recorder("root", events)
    root.add_child(Recorder("b", events))
    root.add_child(Recorder("a", events))
    plain = SceneNode("z")
    root.add_child(plain)
    root.initialize()
    assert events == [("init", "root"), ("init", "a"), ("init", "b")]
    assert all(c.initialized for c in root.children)
    assert plain.initialized


def test_update_and_render_visit_enabled_initialized_nodes():
    events = []
    root = Recorder("root", events)
    child = Recorder("c", events)
    root.add_child(child)
    plain = SceneNode("plain")
    root.add_child(plain)
    root.update()
    assert events == []
    root.initialize()
    assert plain.initialized
    events.clear()
    child.enabled = False
    root.update()
    root.render()
    assert events == [("update", "root"), ("render", "root")]


def test_failed_child_rolls_back():
    events = []
    root = Recorder("root", events)
    a = Recorder("a", events)
    root.add_child(a)
    root.add_child(Recorder("b", events, fail=True))
    plain = SceneNode("c")
    root.add_child(plain)
    with pytest.raises(RuntimeError):
        root.initialize()
    assert not root.initialized
    assert not a.initialized
    assert not plain.initialized
    assert events[-2:] == [("destroy", "a"), ("destroy", "root")]


def test_double_initialize_and_destroy_uninitialized_raise():
    node = SceneNode("n")
    with pytest.raises(RuntimeError):
        node.destroy()
    node.initialize()
    with pytest.raises(RuntimeError):
        node.initialize()
    node.destroy()
    assert not node.initialized


def test_child_added_to_initialized_parent_is_initialized():
    events = []
    root = Recorder("root", events)
    root.initialize()
    child = Recorder("late", events)
    root.add_child(child)
    plain = SceneNode("plain")
    root.add_child(plain)
    assert child.initialized
    assert plain.initialized
    root.destroy()
    assert not plain.initialized
    assert events[-2:] == [("destroy", "late"), ("destroy", "root")]


def test_set_engine_propagates():
    root = SceneNode("root")
    mid = SceneNode("mid")
    leaf = SceneNode("leaf")
    mid.add_child(leaf)
    root.add_child(mid)
    engine = object()
    root.set_engine(engine)
    assert leaf.engine is engine
    other = SceneNode("other")
    root.add_child(other)
    assert other.engine is engine