"""화면 전체에 눈이 내리는 효과"""

from snowing.field import CullMode, Particle, ParticleField
from snowing.random_source import RandomSource
from snowing.sprite import SpriteCache

__version__ = "1.0.0"

__all__ = [
    "CullMode",
    "Particle",
    "ParticleField",
    "RandomSource",
    "SpriteCache",
]
