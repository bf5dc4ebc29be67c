from .enums import Derivation


class Settings:
    def __init__(self):
        self._seed = 0
        self._derivation = Derivation.U32
        self._count = 10
        self._bound = None
        self._byte_length = 16
        self._b_show_bits = False

    def set_seed(self, seed):
        self._seed = seed

    def get_seed(self):
        return self._seed

    def set_derivation(self, e_derivation):
        self._derivation = Derivation(e_derivation)

    def get_derivation(self):
        return self._derivation

    def set_count(self, i_count):
        if i_count < 0:
            raise ValueError(f"Count must be >= 0, got {i_count}")
        self._count = i_count

    def get_count(self):
        return self._count

    def set_bound(self, i_bound):
        self._bound = i_bound

    def get_bound(self):
        return self._bound

    def set_byte_length(self, i_byte_length):
        if i_byte_length < 0:
            raise ValueError(f"Byte length must be >= 0, got {i_byte_length}")
        self._byte_length = i_byte_length

    def get_byte_length(self):
        return self._byte_length

    def set_show_bits(self, b_show_bits):
        self._b_show_bits = b_show_bits

    def is_show_bits(self):
        return self._b_show_bits

    def validate(self):
        if self._derivation.is_bounded and self._bound is None:
            raise ValueError(f"Derivation '{self._derivation.value}' requires --bound")

    def print(self):
        print(f"Seed: {self._seed} (0x{self._seed & 0xFFFFFFFFFFFFFFFF:x})")
        print(f"Derivation: {self._derivation.value}")
        print(f"Count: {self._count}")
        if self._derivation.is_bounded:
            print(f"Bound: {self._bound}")
        if self._derivation == Derivation.BYTES:
            print(f"Byte length: {self._byte_length}")
