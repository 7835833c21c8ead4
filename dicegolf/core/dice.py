"""
Dice Golf - Dice Roller

Rolls the distance allowed for the next shot.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .constants import DICE_SIDES, FAIRWAY_MODIFIER, PUTTER_DISTANCE, SAND_MODIFIER
from .terrain import Terrain

logger = logging.getLogger(__name__)

TERRAIN_MODIFIERS = {
    Terrain.FAIRWAY: FAIRWAY_MODIFIER,
    Terrain.SAND: SAND_MODIFIER,
}


@dataclass(frozen=True)
class DiceRoll:
    """A rolled (or forced) shot distance."""

    base: int
    modifier: int
    final: int
    putter: bool = False

    def label(self) -> str:
        """Readout such as 'Roll: 3 +1', 'Roll: 4 -1' or 'Roll: 2'."""
        if self.modifier < 0:
            return f"Roll: {self.base} -1"
        if self.modifier > 0:
            return f"Roll: {self.base} +1"
        return f"Roll: {self.base}"


def terrain_modifier(terrain: Terrain) -> int:
    """Distance modifier for a lie: +1 on fairway, -1 in sand, otherwise 0."""
    return TERRAIN_MODIFIERS.get(terrain, 0)


class DiceRoller:
    """
    Rolls a six-sided die and applies the lie's modifier.

    The final distance is never clamped: a 1 rolled in sand gives 0, which
    allows no legal move. Callers decide whether to reroll.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Create a dice roller.

        Args:
            seed: Seed for a private random generator
            rng: Random generator to use instead (anything with randint)
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def reseed(self, seed: Optional[int] = None):
        self.rng.seed(seed)

    def roll(self, terrain: Terrain) -> DiceRoll:
        """
        Roll the distance for a shot from the given lie.

        Args:
            terrain: Terrain the ball lies on

        Returns:
            DiceRoll with base in 1..6, modifier, and final = base + modifier
        """
        base = self.rng.randint(1, DICE_SIDES)
        modifier = terrain_modifier(terrain)
        result = DiceRoll(base, modifier, base + modifier)
        logger.debug("Rolled %d%+d on %s -> %d", base, modifier, terrain.value, result.final)
        return result

    def force_putter(self) -> DiceRoll:
        """Select the putter: distance 1 regardless of lie, without rolling."""
        return DiceRoll(PUTTER_DISTANCE, 0, PUTTER_DISTANCE, putter=True)
