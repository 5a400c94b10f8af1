from .fertilizer import Fertilizer
from .lawn_profile import GRASS_TYPES, MOWER_TYPES, GrassType, LawnProfile, MowerType
from .wages import WORKERS, Wages, Worker

__all__ = [
    "GRASS_TYPES",
    "MOWER_TYPES",
    "WORKERS",
    "Fertilizer",
    "GrassType",
    "LawnProfile",
    "MowerType",
    "Wages",
    "Worker",
]
