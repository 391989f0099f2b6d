"""Equipment modifiers and direct stat changes."""

from tilequest.models.items import EquipmentModifier, Item
from tilequest.models.stats import StatLedger


class StatCalculator:
    """Applies item bonuses and heals to a stat ledger."""

    @staticmethod
    def equip(ledger: StatLedger, item: Item) -> None:
        """Add an item's bonuses. Hp is clamped, never raised."""
        StatCalculator.apply_modifier(ledger, item.modifier, sign=1)

    @staticmethod
    def unequip(ledger: StatLedger, item: Item) -> None:
        """Remove an item's bonuses; exact inverse of equip() on the stat fields."""
        StatCalculator.apply_modifier(ledger, item.modifier, sign=-1)

    @staticmethod
    def apply_modifier(ledger: StatLedger, modifier: EquipmentModifier, sign: int) -> None:
        """
        Add (sign=1) or subtract (sign=-1) a modifier.

        Args:
            ledger: Ledger to update
            modifier: Flat stat deltas
            sign: Direction of the change
        """
        if sign not in (1, -1):
            raise ValueError(f"sign must be 1 or -1, got {sign}")

        # Hp is clamped down if max_hp shrinks below it
        ledger.apply_changes(
            max_hp=ledger.max_hp + sign * modifier.max_hp_delta,
            min_damage=ledger.min_damage + sign * modifier.damage_delta,
            max_damage=ledger.max_damage + sign * modifier.damage_delta,
            accuracy=ledger.accuracy + sign * modifier.accuracy_delta,
        )

    @staticmethod
    def heal(ledger: StatLedger, amount: int) -> int:
        """
        Restore hp, capped at max_hp.

        Returns:
            Hp actually restored
        """
        before = ledger.hp
        ledger.set_hp(ledger.hp + amount)
        return ledger.hp - before
