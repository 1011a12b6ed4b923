import threading

import pytest

from patternkit.singleton import instance


@pytest.fixture(autouse=True)
def _clean():
    yield
    instance().clear()


def test_new():
    s = instance()
    s["name"] = "lee"
    s1 = instance()
    assert s1["name"] == "lee"
    s1["name"] = "anne"
    assert s["name"] == "anne"


def test_same_across_threads():
    def write(n):
        instance()[f"key{n}"] = str(n)

    threads = [threading.Thread(target=write, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    shared = instance()
    assert sorted(shared) == sorted(f"key{n}" for n in range(8))
    assert shared["key3"] == "3"