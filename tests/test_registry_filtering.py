from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np
import pytest

from simpleregistry import NotFoundError, Registry, RegistryItem


@dataclass
class Player(RegistryItem):
    name: str
    hp: int = 100


@dataclass
class Enemy(RegistryItem):
    name: str
    hp: int = 10


class Boss(Enemy):
    pass


def _world() -> Registry:
    reg = Registry("world")
    reg.register("player", Player("ada"))
    reg.register("orc", Enemy("orc", hp=12))
    reg.register("dragon", Boss("dragon", hp=500))
    reg.register("gold", 250)
    reg.register("heightmap", np.zeros((4, 4), dtype=np.float32))
    return reg


def test_items_of_type_includes_subtypes() -> None:
    reg = _world()

    enemies = reg.items_of_type(Enemy)

    assert list(enemies) == ["orc", "dragon"]
    assert enemies["dragon"].hp == 500


def test_items_of_type_exact() -> None:
    reg = _world()

    assert list(reg.items_of_type(Enemy, exact=True)) == ["orc"]
    assert list(reg.items_of_type(Boss, exact=True)) == ["dragon"]
    assert list(reg.items_of_type(np.ndarray)) == ["heightmap"]


def test_items_of_type_returns_a_copy() -> None:
    reg = _world()

    enemies = reg.items_of_type(Enemy)
    enemies.clear()

    assert len(reg.items_of_type(Enemy)) == 2


def test_find_item() -> None:
    reg = _world()

    assert reg.find_item(Enemy, lambda e: e.hp > 100).name == "dragon"
    assert reg.find_item(Enemy, lambda e: e.hp > 0).name == "orc"

    with pytest.raises(NotFoundError):
        reg.find_item(Enemy, lambda e: e.hp > 1000)
    with pytest.raises(NotFoundError):
        reg.find_item(Player, lambda p: p.name == "bob")


def test_find_items() -> None:
    reg = _world()

    strong = reg.find_items(Enemy, lambda e: e.hp >= 12)

    assert [e.name for e in strong] == ["orc", "dragon"]
    assert list(reg.find_items(Enemy, lambda e: False)) == []
    assert [e.name for e in reg.find_items(Enemy, lambda e: True, exact=True)] == ["orc"]


def test_find_items_is_unaffected_by_later_changes() -> None:
    reg = _world()

    found = reg.find_items(Enemy, lambda e: True)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        reg.clear()

    assert [e.name for e in found] == ["orc", "dragon"]


def test_predicate_must_be_callable() -> None:
    reg = _world()

    with pytest.raises(TypeError):
        reg.find_item(Enemy, None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        reg.find_items(Enemy, "hp")  # type: ignore[arg-type]


def test_player_enemy_scenario() -> None:
    reg = Registry()
    player = Player("ada")
    enemy = Enemy("orc")
    enemy2 = Enemy("troll")

    reg.register("player", player)
    reg.register("enemy", enemy)
    assert reg.items_of_type(Enemy) == {"enemy": enemy}

    reg.override_by_old(enemy, enemy2)
    assert reg.get("enemy") is enemy2

    with pytest.warns(UserWarning):
        reg.unregister_key("enemy")
    with pytest.raises(NotFoundError):
        reg.get("enemy")
    assert reg.get("player") is player
