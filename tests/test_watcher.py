from sattools.literal import Literal
from sattools.watcher import Watcher


def test_store_and_watch_in_order():
    watcher = Watcher()
    watcher.store("a", 1)
    watcher.store("a", 2)
    watcher.store("b", 3)
    assert watcher.watch("a") == (1, 2)
    assert watcher.watch("b") == (3,)


def test_missing_key_is_empty():
    watcher = Watcher()
    assert watcher.watch("x") == ()
    watcher.store("y", 1)
    assert len(watcher.watch("x")) == 0


def test_literal_keys():
    watcher = Watcher()
    watcher.store(Literal(1), "c1")
    watcher.store(Literal(-1), "c2")
    watcher.store(Literal(1), "c3")
    assert watcher.watch(Literal(1)) == ("c1", "c3")
    assert watcher.watch(Literal(-1)) == ("c2",)


def test_watch_returns_snapshot():
    watcher = Watcher()
    watcher.store(0, "v")
    snapshot = watcher.watch(0)
    watcher.store(0, "w")
    assert snapshot == ("v",)
    assert watcher.watch(0) == ("v", "w")