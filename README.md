# designpatterns

Small, readable implementations of the classic object-oriented design
patterns. Each pattern is in a module of its own. None of them needs
anything outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Patterns

| Module | Pattern | Main names |
| --- | --- | --- |
| `designpatterns.simple_factory` | Simple factory | `new_api`, `API`, `HiAPI`, `HelloAPI` |
| `designpatterns.facade` | Facade | `new_api`, `FacadeAPI`, `AModuleAPI`, `BModuleAPI` |
| `designpatterns.adapter` | Adapter | `new_adaptee`, `new_adapter`, `Target`, `Adapter` |
| `designpatterns.singleton` | Singleton | `get_instance`, `Singleton` |
| `designpatterns.factory_method` | Factory method | `PlusOperatorFactory`, `MinusOperatorFactory` |
| `designpatterns.abstract_factory` | Abstract factory | `RDBDAOFactory`, `XMLDAOFactory` |
| `designpatterns.builder` | Builder | `Director`, `Builder1`, `Builder2` |
| `designpatterns.prototype` | Prototype | `Cloneable`, `PrototypeManager` |
| `designpatterns.mediator` | Mediator | `get_mediator_instance`, `CDDriver`, `CPU`, `VideoCard`, `SoundCard` |
| `designpatterns.proxy` | Proxy | `Proxy`, `RealSubject` |
| `designpatterns.observer` | Observer | `Subject`, `Reader` |
| `designpatterns.command` | Command | `Box`, `MotherBoard`, `StartCommand`, `RebootCommand` |
| `designpatterns.iterator` | Iterator | `Numbers`, `iterator_print` |
| `designpatterns.composite` | Composite | `new_component`, `NodeKind`, `Leaf`, `Composite` |
| `designpatterns.template_method` | Template method | `new_http_downloader`, `new_ftp_downloader` |
| `designpatterns.strategy` | Strategy | `Payment`, `Cash`, `Bank` |
| `designpatterns.state` | State | `DayContext` |
| `designpatterns.memento` | Memento | `Game`, `GameMemento` |
| `designpatterns.flyweight` | Flyweight | `ImageViewer`, `get_image_flyweight_factory` |
| `designpatterns.interpreter` | Interpreter | `Parser`, `ValNode`, `AddNode`, `MinNode` |
| `designpatterns.decorator` | Decorator | `wrap_add_decorator`, `wrap_mul_decorator` |
| `designpatterns.chain` | Chain of responsibility | `new_project_manager_chain`, `new_dep_manager_chain`, `new_general_manager_chain` |
| `designpatterns.bridge` | Bridge | `CommonMessage`, `UrgencyMessage`, `via_sms`, `via_email` |
| `designpatterns.visitor` | Visitor | `CustomerCol`, `ServiceRequestVisitor`, `AnalysisVisitor` |

## Examples

```python
from designpatterns.simple_factory import new_api

new_api(1).say("Tom")   # 'Hi, Tom'
new_api(2).say("Tom")   # 'Hello, Tom'
new_api(3)              # raises ValueError
```

```python
from designpatterns.factory_method import PlusOperatorFactory

op = PlusOperatorFactory().create()
op.a, op.b = 1, 2
op.result()             # 3
```

```python
from designpatterns.decorator import ConcreteComponent, wrap_add_decorator, wrap_mul_decorator

component = wrap_mul_decorator(wrap_add_decorator(ConcreteComponent(), 10), 8)
component.calc()        # 80
```

```python
from designpatterns.interpreter import Parser

parser = Parser()
parser.parse("1 + 2 + 3 - 4 + 5 - 6")
parser.result().interpret()   # 1
```

`Parser.parse` raises `ValueError` when an operator has no left or no right
operand.

```python
from designpatterns.mediator import CDDriver, CPU, SoundCard, VideoCard, get_mediator_instance

mediator = get_mediator_instance()
mediator.cd = CDDriver()
mediator.cpu = CPU()
mediator.video = VideoCard()
mediator.sound = SoundCard()

mediator.cd.read_data()
mediator.sound.data     # 'music'
mediator.video.data     # 'image'
```

All four parts must be set on the shared mediator before `read_data` is
called.

```python
from designpatterns.memento import Game

game = Game(hp=10, mp=10)
saved = game.save()
game.play(-2, -3)
game.status()           # prints and returns 'Current HP:7, MP:8'
game.load(saved)
game.status()           # prints and returns 'Current HP:10, MP:10'
```

```python
from designpatterns.chain import (
    new_project_manager_chain,
    new_dep_manager_chain,
    new_general_manager_chain,
)

project = new_project_manager_chain()
department = new_dep_manager_chain()
general = new_general_manager_chain()
project.successor = department
department.successor = general

project.handle_fee_request("tom", 1400)
# prints: Dep manager permit tom 1400 fee request
# returns: True
```

## Output

Many of the patterns report what they do by printing to standard output
(the abstract factory stores, the observer's readers, the commands, the
composite's `display`, the downloaders, the payment strategies, the days of
the week, the chain's managers, the message channels and the visitors).
Some of these also return the printed line. The payment strategies, the
message channels and `XMLDetailDAO` print without a trailing newline.

## What this package does not do

It is a library of examples only: it has no command-line program, and the
storage, download, payment and messaging classes print a description of
what they would do rather than touch any database, network or service.