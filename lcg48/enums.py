from enum import Enum


class Derivation(Enum):
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    BOOL = "bool"
    F32 = "f32"
    F64 = "f64"
    GAUSSIAN = "gaussian"
    I32_BOUND = "i32_bound"
    U32_BOUND = "u32_bound"
    BYTES = "bytes"

    @property
    def is_float(self):
        return self in (Derivation.F32, Derivation.F64, Derivation.GAUSSIAN)

    @property
    def is_bounded(self):
        return self in (Derivation.I32_BOUND, Derivation.U32_BOUND)
