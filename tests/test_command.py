import pytest

from patternkit.command import (
    CommandType,
    ConcreteCommandA,
    ConcreteCommandB,
    Invoker,
    ReceiverA,
    ReceiverB,
    create_command,
)


def test_invoker_executes_in_order(capsys):
    command_a = create_command("a", ReceiverA())
    command_b = create_command("b", ReceiverB())
    invoker = Invoker()
    invoker.add_command(command_a)
    invoker.add_command(command_b)
    assert invoker.execute_command() == ["接收者A处理请求", "接收者B处理请求"]
    assert capsys.readouterr().out == "接收者A处理请求\n接收者B处理请求\n"


def test_create_command_types(capsys):
    command_a = create_command(CommandType.A, ReceiverB())
    command_b = create_command("b", ReceiverA())
    assert isinstance(command_a, ConcreteCommandA)
    assert isinstance(command_b, ConcreteCommandB)
    invoker = Invoker()
    invoker.add_command(command_a)
    invoker.add_command(command_b)
    assert invoker.execute_command() == ["接收者B处理请求", "接收者A处理请求"]


def test_create_command_unknown_kind():
    with pytest.raises(ValueError):
        create_command("c", ReceiverA())


def test_empty_invoker():
    assert Invoker().execute_command() == []