from dataclasses import dataclass

import numpy as np

import simpleregistry
from simpleregistry import Registry, RegistryItem


@dataclass
class Player(RegistryItem):
    name: str
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class Enemy(RegistryItem):
    name: str
    hp: int


def main() -> None:
    actors = Registry("actors", value_type=RegistryItem)
    actors.register("player", Player("ada"))
    actors.register("orc", Enemy("orc", hp=12))
    actors.register("troll", Enemy("troll", hp=40))

    strong = [e.name for e in actors.find_items(Enemy, lambda e: e.hp > 20)]
    print(f"strong enemies: {strong}")

    # The shared default table accepts anything, arrays included.
    terrain = np.random.default_rng(0).random((8, 8), dtype=np.float32)
    simpleregistry.REGISTRY.register("terrain", terrain)
    print(f"terrain key: {simpleregistry.REGISTRY.get_key(terrain.copy())}")

    actors.override_by_old(Enemy("orc", hp=12), Enemy("orc", hp=1))
    print(f"orc hp after override: {actors.get('orc', Enemy).hp}")


if __name__ == "__main__":
    main()
