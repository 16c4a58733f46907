import threading

import pytest

from nslib import multithreading


def test_create_and_get_one_returns_result():
    multithreading.create("mt-add", lambda a, b: a + b, 2, 5)
    assert multithreading.get_one("mt-add") == 7
    assert multithreading.exists("mt-add")
    multithreading.wait_one("mt-add")


def test_wait_one_removes_thread():
    multithreading.create("mt-wait", lambda: None)
    assert multithreading.is_alive("mt-wait")
    multithreading.wait_one("mt-wait")
    assert not multithreading.exists("mt-wait")
    assert not multithreading.is_alive("mt-wait")


def test_kwargs_are_passed():
    multithreading.create("mt-kw", lambda *, word: word.upper(), word="abc")
    assert multithreading.get_one("mt-kw") == "ABC"
    multithreading.wait_one("mt-kw")


def test_duplicate_name_raises():
    multithreading.create("mt-dup", lambda: 1)
    try:
        with pytest.raises(ValueError):
            multithreading.create("mt-dup", lambda: 2)
        assert multithreading.get_one("mt-dup") == 1
    finally:
        multithreading.wait_one("mt-dup")


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        multithreading.get_one("mt-missing")
    with pytest.raises(KeyError):
        multithreading.wait_one("mt-missing")


def test_registry_is_per_thread():
    multithreading.create("mt-local", lambda: "here")
    seen = []
    worker = threading.Thread(target=lambda: seen.append(multithreading.exists("mt-local")))
    worker.start()
    worker.join()
    assert seen == [False]
    assert multithreading.exists("mt-local")
    multithreading.wait_one("mt-local")