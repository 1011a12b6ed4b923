import logging

from patternkit.decorator import (
    AppleDecorator,
    Fruit,
    create_apple_decorator,
    log_decorate,
)


def test_create_apple_decorator():
    comp = Fruit(count=8, description="水果统称")
    result = create_apple_decorator(comp, "apple", 20)
    assert result.count == 28
    assert result.describe() == "水果统称, apple"


def test_decorators_stack():
    inner = AppleDecorator(Fruit(1, "fruit"), "apple", 2)
    outer = AppleDecorator(inner, "pear", 3)
    assert outer.count == 6
    assert outer.describe() == "fruit, apple, pear"


def double(n):
    return n * 2


def test_log_decorate(caplog):
    caplog.set_level(logging.INFO, logger="patternkit.decorator")
    f = log_decorate(double)
    assert f(5) == 10
    assert [r.getMessage() for r in caplog.records] == [
        "starting inner func",
        "complete inner func",
    ]


def test_log_decorate_keeps_name():
    assert log_decorate(double).__name__ == "double"