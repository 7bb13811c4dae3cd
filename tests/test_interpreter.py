import pytest

from designpatterns.interpreter import AddNode, MinNode, Parser, ValNode


def test_interpreter():
    p = Parser()
    p.parse("1 + 2 + 3 - 4 + 5 - 6")
    assert p.result().interpret() == 1


def test_single_value():
    p = Parser()
    p.parse("7")
    assert p.result().interpret() == 7


def test_negative_result():
    p = Parser()
    p.parse("5 - 8")
    assert p.result().interpret() == -3


def test_non_number_counts_as_zero():
    p = Parser()
    p.parse("4 + x")
    assert p.result().interpret() == 4


def test_nodes_directly():
    tree = MinNode(AddNode(ValNode(3), ValNode(4)), ValNode(10))
    assert tree.interpret() == -3


def test_missing_right_operand():
    with pytest.raises(ValueError):
        Parser().parse("1 +")


def test_missing_left_operand():
    with pytest.raises(ValueError):
        Parser().parse("+ 1")


def test_parser_reusable():
    p = Parser()
    p.parse("1 + 1")
    p.parse("10 - 3")
    assert p.result().interpret() == 7