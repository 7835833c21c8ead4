"""
Dice Golf - Terrain Classifier

Maps a noise height to a terrain category using fixed threshold bands.
"""

from .terrain import Terrain

# Upper bounds, evaluated low-to-high; the first band the height falls
# below wins. The last two bands both yield trees.
TERRAIN_BANDS: tuple[tuple[float, Terrain], ...] = (
    (0.0, Terrain.ROUGH),
    (0.2, Terrain.FAIRWAY),
    (0.3, Terrain.SAND),
    (0.4, Terrain.WATER),
    (0.5, Terrain.TREES),
)

TERRAIN_ABOVE_BANDS = Terrain.TREES


class TerrainClassifier:
    """Classifies noise heights into terrain categories."""

    def __init__(self, bands: tuple[tuple[float, Terrain], ...] = TERRAIN_BANDS):
        self.bands = bands

    def classify(self, height: float) -> Terrain:
        """
        Classify a height sample.

        Args:
            height: Noise value, nominally in [-1, 1]

        Returns:
            Terrain category for the first band whose bound exceeds height
        """
        for upper_bound, terrain in self.bands:
            if height < upper_bound:
                return terrain
        return TERRAIN_ABOVE_BANDS
