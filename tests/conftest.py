"""Pytest configuration and fixtures."""

from collections import deque

import pytest

from tilequest.engine.progression_config import ProgressionConfig
from tilequest.engine.random_source import RandomSource
from tilequest.models.items import Inventory, Item
from tilequest.models.stats import StatLedger


class ScriptedRandomSource(RandomSource):
    """Random source that returns queued values in call order."""

    def __init__(self, values=()) -> None:
        super().__init__(0)
        self.values = deque(values)

    def push(self, *values: int) -> None:
        self.values.extend(values)

    def randint(self, lo: int, hi: int) -> int:
        value = self.values.popleft()
        assert lo <= value <= hi, f"scripted value {value} outside [{lo}, {hi}]"
        return value

    def below(self, n: int) -> int:
        value = self.values.popleft()
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        return value


class StubItemProvider:
    """Hands out a fixed item."""

    def __init__(self, item: Item) -> None:
        self.item = item
        self.calls = 0

    def get_random_item(self, rng):
        self.calls += 1
        return self.item


def fixed_max_exp(level: int, offset: int) -> int:
    """Experience curve ignoring the offset: 10 exp per level."""
    return 10 * level


@pytest.fixture
def scripted_rng():
    """Empty scripted random source."""
    return ScriptedRandomSource()


@pytest.fixture
def config():
    """Default design constants."""
    return ProgressionConfig()


@pytest.fixture
def ledger():
    """Level 1 ledger with 50 max hp."""
    return StatLedger(
        level=1,
        experience=0,
        max_experience=10,
        hp=50,
        max_hp=50,
        accuracy=80,
        min_damage=7,
        max_damage=13,
        gold=0,
    )


@pytest.fixture
def sword():
    """Equippable item with every bonus set."""
    return Item(name="Iron Sword", mhp=10, dmg=3, acc=2)


@pytest.fixture
def full_inventory():
    """Inventory with no free slots."""
    return Inventory(capacity=2, items=[Item(name="Rock"), Item(name="Stick")])


@pytest.fixture
def item_provider():
    """Provider that always drops a plain gem."""
    return StubItemProvider(Item(name="Gem"))
