from concurrent.futures import ThreadPoolExecutor

import pytest

from patternkit.pubsub import Publisher, Subscriber


def test_subscriber_receives_published_value():
    publisher = Publisher(10, 1.0)
    sub = publisher.subscribe()
    publisher.publish("hello world")
    assert sub.get(timeout=1) == "hello world"


def test_every_subscriber_gets_the_value():
    publisher = Publisher(10, 1.0)
    first = publisher.subscribe()
    second = publisher.subscribe()
    publisher.publish(42)
    assert first.get(timeout=1) == 42
    assert second.get(timeout=1) == 42


def test_topic_filters_values():
    publisher = Publisher(10, 1.0)
    everything = publisher.subscribe()
    news = publisher.subscribe_topic(lambda v: isinstance(v, str) and "news" in v)
    publisher.publish("hello, world!")
    publisher.publish("hello, news!")
    assert news.get(timeout=1) == "hello, news!"
    with pytest.raises(TimeoutError):
        news.get(timeout=0.05)
    assert [everything.get(timeout=1), everything.get(timeout=1)] == [
        "hello, world!",
        "hello, news!",
    ]


def test_order_is_kept():
    publisher = Publisher(10, 1.0)
    sub = publisher.subscribe()
    values = ["a", "b", "c"]
    for value in values:
        publisher.publish(value)
    publisher.close()
    assert list(sub) == values


def test_exit_closes_subscriber():
    publisher = Publisher(10, 1.0)
    sub = publisher.subscribe()
    publisher.exit(sub)
    assert sub.closed is True
    with pytest.raises(EOFError):
        sub.get(timeout=1)


def test_exit_twice_raises():
    publisher = Publisher(10, 1.0)
    sub = publisher.subscribe()
    publisher.exit(sub)
    with pytest.raises(RuntimeError):
        publisher.exit(sub)


def test_exited_subscriber_no_longer_receives():
    publisher = Publisher(10, 1.0)
    kept = publisher.subscribe()
    gone = publisher.subscribe()
    publisher.exit(gone)
    publisher.publish("x")
    assert kept.get(timeout=1) == "x"
    assert list(gone) == []


def test_close_closes_all_and_keeps_buffered_values():
    publisher = Publisher(10, 1.0)
    first = publisher.subscribe()
    second = publisher.subscribe()
    publisher.publish(1)
    publisher.close()
    assert first.closed and second.closed
    assert list(first) == [1]
    assert list(second) == [1]


def test_full_subscriber_misses_value_after_timeout():
    publisher = Publisher(1, 0.05)
    sub = publisher.subscribe()
    publisher.publish("first")
    publisher.publish("second")
    assert sub.get(timeout=1) == "first"
    with pytest.raises(TimeoutError):
        sub.get(timeout=0.05)


def test_unbuffered_delivers_to_waiting_reader():
    publisher = Publisher(0, 2.0)
    sub = publisher.subscribe()
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(sub.get, timeout=2)
        publisher.publish("ping")
        assert future.result(timeout=3) == "ping"


def test_unbuffered_without_reader_drops_value():
    publisher = Publisher(0, 0.05)
    sub = publisher.subscribe()
    publisher.publish("lost")
    with pytest.raises(TimeoutError):
        sub.get(timeout=0.05)


def test_negative_buffer_rejected():
    with pytest.raises(ValueError):
        Publisher(-1, 1.0)
    with pytest.raises(ValueError):
        Subscriber(-1)


def test_publish_after_close_reaches_nobody():
    publisher = Publisher(10, 1.0)
    sub = publisher.subscribe()
    publisher.close()
    publisher.publish("late")
    assert list(sub) == []