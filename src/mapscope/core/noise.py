"""Default procedural noise source for seeding maps."""

from __future__ import annotations

from perlin_noise import PerlinNoise

from mapscope.core.constants import NOISE_SEED


class PerlinSampler:
    """
    Callable 2D Perlin noise sampler.

    Returns values roughly centred on zero; identical seeds give identical
    maps.
    """

    def __init__(self, seed: int = NOISE_SEED, octaves: int = 1) -> None:
        self.seed = seed
        self.octaves = octaves
        self._noise = PerlinNoise(octaves=octaves, seed=seed)

    def __call__(self, x: float, y: float) -> float:
        return float(self._noise([x, y]))
