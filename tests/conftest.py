"""Shared fixtures for lcg48 tests."""

import os
import sys
import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


class CountingGenerator:
    """Factory for a Generator subclass that counts calls to next()."""

    @staticmethod
    def create(seed):
        from lcg48.generator import Generator

        class _Counting(Generator):
            def __init__(self, seed):
                super().__init__(seed)
                self.calls = 0

            def next(self, bits):
                self.calls += 1
                return super().next(bits)

        return _Counting(seed)


@pytest.fixture
def counting_generator():
    """Callable building a generator that records how many draws it made."""
    return CountingGenerator.create


@pytest.fixture
def sample_vector_set():
    """A small VectorSet covering integer, float and byte derivations."""
    from lcg48.vectors import VectorSet, generate_vector

    return VectorSet(
        vectors=[
            generate_vector(0, 'i32', 4),
            generate_vector(42, 'i32_bound', 4, bound=100),
            generate_vector(0, 'f32', 3),
            generate_vector(0, 'gaussian', 3),
            generate_vector(0, 'bytes', 2, byte_length=6),
        ],
        timestamp='2026-01-01T00:00:00',
    )
