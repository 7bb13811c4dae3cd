from designpatterns.decorator import (
    ConcreteComponent,
    wrap_add_decorator,
    wrap_mul_decorator,
)


def test_decorator():
    c = ConcreteComponent()
    c = wrap_add_decorator(c, 10)
    c = wrap_mul_decorator(c, 8)
    assert c.calc() == 80


def test_concrete_is_zero():
    assert ConcreteComponent().calc() == 0


def test_order_matters():
    c = wrap_mul_decorator(ConcreteComponent(), 8)
    c = wrap_add_decorator(c, 10)
    assert c.calc() == 10


def test_stacked_adds():
    c = wrap_add_decorator(wrap_add_decorator(ConcreteComponent(), 2), 3)
    assert c.calc() == 5