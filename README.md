# patternkit

A collection of small, self-contained implementations of classic design
patterns. Each module covers one pattern and can be imported and used on its
own. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Pattern |
| --- | --- |
| `patternkit.builder` | Builder (`Director`, `Builder`, `Car`, `Vehicle`) |
| `patternkit.factory` | Factory method (`generate_payment`, `Kind`, `CashPay`, `CreditPay`) |
| `patternkit.abstractfactory` | Abstract factory (`ConcreteFactory`, `ConcreteProduct`) |
| `patternkit.pool` | Object pool (`Pool`, `PooledObject`) |
| `patternkit.singleton` | Singleton (`instance()`) |
| `patternkit.prototype` | Prototype (`Example.clone`) |
| `patternkit.decorator` | Decorator (`create_apple_decorator`, `log_decorate`) |
| `patternkit.proxy` | Proxy (`ProxyObject`, `RealObject`) |
| `patternkit.adapter` | Adapter (`GamePlayerAdapter`, `play`) |
| `patternkit.bridge` | Bridge (`Phone`, `Apple`, `HuaWei`, `Cpu`, `Storage`) |
| `patternkit.composite` | Composite (`Menu`, `MenuItem`, `MenuGroup`) |
| `patternkit.facade` | Facade (`Facade`, `Music`, `Video`, `Count`) |
| `patternkit.flyweight` | Flyweight (`ShapeFactory`, `Circle`) |
| `patternkit.observer` | Observer (`ShareNotifier`, `InvestorObserver`, `new_event`) |
| `patternkit.strategy` | Strategy (`create_operation`, `Addition`, `Multiplication`) |
| `patternkit.state` | State (`Context` and its states) |
| `patternkit.visitor` | Visitor (`ElementA`, `ElementContainer`, visitors A and B) |
| `patternkit.iterator` | Iterator (`Iterator`, `Container`) |
| `patternkit.template` | Template method (`Person`, `Boy`, `Girl`) |
| `patternkit.chain` | Chain of responsibility (`Handler`, `ObjectA`, `ObjectB`) |
| `patternkit.command` | Command (`Invoker`, `create_command`, `CommandType`) |
| `patternkit.memento` | Memento (`Originator`, `Memento`, `Caretaker`) |
| `patternkit.mediator` | Mediator (`Mediator`, `Technical`, `Market`) |
| `patternkit.interpreter` | Interpreter (`create_expression`, `Equal`, `Contain`) |
| `patternkit.semaphore` | Counting semaphore with timeouts |
| `patternkit.generator` | Generator (`count`) |
| `patternkit.pubsub` | Publish / subscribe with topic filters |

Most demonstration methods both print their message and return it, so the
result can be checked in code.

## Examples

Builder:

```python
from patternkit.builder import Car, Director

car = Car()
Director(car).construct()
car.build()  # Vehicle(wheels=4, seats=4, structure='Car')
```

Strategy:

```python
from patternkit.strategy import Addition, create_operation

op = create_operation(Addition())
op.operate(1, 2)  # 3
```

Factory method:

```python
from patternkit.factory import Kind, generate_payment

payment = generate_payment(Kind.CASH, 100.0)
payment.pay(20)
payment.balance  # 80.0
```

Paying more than the balance raises `InsufficientBalanceError`; an unknown
kind raises `ValueError`.

Semaphore, used as a context manager:

```python
from patternkit.semaphore import Semaphore

sem = Semaphore(1, timeout=2.0)
with sem:
    ...  # at most one holder at a time
```

`acquire()` raises `NoTicketsError` when no ticket frees up within the
timeout, and `release()` raises `IllegalReleaseError` when nothing was held.

Publish / subscribe:

```python
from patternkit.pubsub import Publisher

publisher = Publisher(10, 0.1)
everything = publisher.subscribe()
numbers = publisher.subscribe_topic(lambda v: isinstance(v, int))
publisher.publish("hello")
publisher.publish(42)
everything.get(1.0)  # "hello"
numbers.get(1.0)     # 42
publisher.close()
```

A subscriber that cannot take a value within the publisher's timeout misses
it. Iterating a subscriber yields values until it is closed.

## Demo

A short demonstration of buffered queues and single-slot tickets, printing
`1`, `2`, `3`, `jie`, `struct` and `struct1`:

```
patternkit-demo
```