from designpatterns.iterator import Numbers, iterator_print


def test_iterator_example(capsys):
    iterator_print(Numbers(1, 10))
    assert capsys.readouterr().out == "".join(f"{n}\n" for n in range(1, 11))


def test_numbers_inclusive():
    assert list(Numbers(3, 5)) == [3, 4, 5]


def test_numbers_can_restart():
    numbers = Numbers(1, 3)
    first = list(numbers)
    second = list(numbers)
    assert first == [1, 2, 3]
    assert second == [1, 2, 3]


def test_empty_when_start_after_end():
    assert list(Numbers(5, 4)) == []


def test_single_value():
    assert list(Numbers(7, 7)) == [7]