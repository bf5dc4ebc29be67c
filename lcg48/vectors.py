"""Golden-vector capture, replay and JSON/CSV export."""

import json
import csv
from dataclasses import dataclass, field, asdict
from typing import List, Optional

import numpy as np

from .enums import Derivation
from .generator import Generator
from .utils import f32_bits, f64_bits


_DTYPES = {
    Derivation.I32: np.int32,
    Derivation.U32: np.uint32,
    Derivation.I64: np.int64,
    Derivation.U64: np.uint64,
    Derivation.BOOL: np.bool_,
    Derivation.F32: np.float32,
    Derivation.F64: np.float64,
    Derivation.GAUSSIAN: np.float64,
    Derivation.I32_BOUND: np.int32,
    Derivation.U32_BOUND: np.uint32,
    Derivation.BYTES: np.uint8,
}


def draw(generator, derivation, bound=None, byte_length=None):
    """Take a single value of the given derivation from ``generator``."""
    if derivation == Derivation.I32:
        return generator.next_i32()
    if derivation == Derivation.U32:
        return generator.next_u32()
    if derivation == Derivation.I64:
        return generator.next_i64()
    if derivation == Derivation.U64:
        return generator.next_u64()
    if derivation == Derivation.BOOL:
        return generator.next_bool()
    if derivation == Derivation.F32:
        return float(generator.next_f32())
    if derivation == Derivation.F64:
        return generator.next_f64()
    if derivation == Derivation.GAUSSIAN:
        return generator.next_gaussian()
    if derivation == Derivation.I32_BOUND:
        return generator.next_i32_bound(bound)
    if derivation == Derivation.U32_BOUND:
        return generator.next_u32_bound(bound)
    if derivation == Derivation.BYTES:
        return list(generator.next_bytes(byte_length))
    raise ValueError(f"Unknown derivation: {derivation}")


def _bit_pattern(derivation, value):
    if derivation == Derivation.F32:
        return f32_bits(value)
    return f64_bits(value)


@dataclass
class VectorConfig:
    """Parameters that fully determine a captured sequence."""
    seed: int
    derivation: str
    count: int
    bound: Optional[int] = None
    byte_length: Optional[int] = None

    def get_derivation(self) -> Derivation:
        return Derivation(self.derivation)

    def validate(self) -> None:
        derivation = self.get_derivation()
        if self.count < 0:
            raise ValueError(f"Count must be >= 0, got {self.count}")
        if derivation.is_bounded and self.bound is None:
            raise ValueError(f"Derivation '{self.derivation}' requires a bound")
        if derivation == Derivation.BYTES and (self.byte_length is None or self.byte_length < 0):
            raise ValueError("Derivation 'bytes' requires a non-negative byte_length")


@dataclass
class GoldenVector:
    """A seed together with the exact output sequence it produces."""
    config: VectorConfig
    values: list
    # IEEE-754 patterns of float values (empty for integer derivations)
    bits: List[int] = field(default_factory=list)

    def values_as_array(self) -> np.ndarray:
        """Values as a numpy array of the derivation's natural dtype."""
        return np.asarray(self.values, dtype=_DTYPES[self.config.get_derivation()])

    def validate(self) -> None:
        self.config.validate()
        if len(self.values) != self.config.count:
            raise ValueError(
                f"Vector has {len(self.values)} values, config count is {self.config.count}"
            )
        if self.config.get_derivation().is_float and len(self.bits) != len(self.values):
            raise ValueError(
                f"Float vector has {len(self.bits)} bit patterns for {len(self.values)} values"
            )

    def verify(self, generator_factory=Generator) -> int:
        """Replay the vector on a fresh generator.

        Returns:
            Index of the first mismatching value, or -1 if all values match.

        Raises:
            ValueError: if the vector is malformed (see ``validate``).
        """
        self.validate()
        derivation = self.config.get_derivation()
        generator = generator_factory(self.config.seed)

        for index, expected in enumerate(self.values):
            actual = draw(generator, derivation, self.config.bound, self.config.byte_length)
            if derivation.is_float:
                if _bit_pattern(derivation, actual) != self.bits[index]:
                    return index
            elif actual != expected:
                return index
        return -1


def generate_vector(seed, derivation, count, bound=None, byte_length=None) -> GoldenVector:
    """Capture ``count`` values of one derivation from a freshly seeded generator."""
    derivation = Derivation(derivation)
    config = VectorConfig(
        seed=seed,
        derivation=derivation.value,
        count=count,
        bound=bound,
        byte_length=byte_length,
    )
    config.validate()

    generator = Generator(seed)
    values = [draw(generator, derivation, bound, byte_length) for _ in range(count)]
    bits = [_bit_pattern(derivation, v) for v in values] if derivation.is_float else []

    return GoldenVector(config=config, values=values, bits=bits)


@dataclass
class VectorSet:
    """Collection of golden vectors with export helpers."""
    vectors: List[GoldenVector] = field(default_factory=list)
    timestamp: str = ""

    def add(self, vector: GoldenVector) -> None:
        self.vectors.append(vector)

    def verify(self, generator_factory=Generator) -> List[int]:
        """Positions (in ``vectors``) of every vector that fails to replay."""
        return [i for i, v in enumerate(self.vectors) if v.verify(generator_factory) != -1]

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return asdict(self)

    def to_json(self, filepath: str) -> None:
        """Export vectors to a JSON file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_csv(self, filepath: str) -> None:
        """Export one row per value to a CSV file."""
        if not self.vectors:
            return
        fieldnames = ['seed', 'derivation', 'bound', 'byte_length', 'index', 'value', 'bits']
        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for vector in self.vectors:
                cfg = vector.config
                for index, value in enumerate(vector.values):
                    if cfg.get_derivation() == Derivation.BYTES:
                        value = bytes(value).hex()
                    writer.writerow({
                        'seed': cfg.seed,
                        'derivation': cfg.derivation,
                        'bound': '' if cfg.bound is None else cfg.bound,
                        'byte_length': '' if cfg.byte_length is None else cfg.byte_length,
                        'index': index,
                        'value': value,
                        'bits': f"0x{vector.bits[index]:x}" if vector.bits else '',
                    })

    @classmethod
    def from_json(cls, filepath: str) -> 'VectorSet':
        """Load vectors from a JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            d = json.load(f)

        vectors = []
        for v in d['vectors']:
            config = VectorConfig(**v['config'])
            vector = GoldenVector(config=config, values=v['values'], bits=v.get('bits', []))
            vector.validate()
            vectors.append(vector)

        return cls(vectors=vectors, timestamp=d.get('timestamp', ''))
