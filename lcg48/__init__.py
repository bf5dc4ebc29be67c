"""Deterministic 48-bit LCG reproducing the java.util.Random sequence."""

from .enums import Derivation
from .generator import Generator
from .vectors import GoldenVector, VectorConfig, VectorSet, generate_vector

__all__ = [
    "Derivation",
    "Generator",
    "GoldenVector",
    "VectorConfig",
    "VectorSet",
    "generate_vector",
]
