import pytest

from designpatterns.memento import Game, GameMemento


def test_game_save_and_load(capsys):
    game = Game(hp=10, mp=10)
    game.status()
    progress = game.save()

    game.play(-2, -3)
    game.status()

    game.load(progress)
    game.status()

    assert capsys.readouterr().out == (
        "Current HP:10, MP:10\n"
        "Current HP:7, MP:8\n"
        "Current HP:10, MP:10\n"
    )


def test_save_captures_values():
    game = Game(hp=4, mp=9)
    assert game.save() == GameMemento(hp=4, mp=9)


def test_memento_unaffected_by_later_play():
    game = Game(hp=1, mp=2)
    snapshot = game.save()
    game.play(5, 5)
    assert (snapshot.hp, snapshot.mp) == (1, 2)
    assert (game.hp, game.mp) == (6, 7)


def test_load_rejects_other_objects():
    with pytest.raises(TypeError):
        Game().load(object())