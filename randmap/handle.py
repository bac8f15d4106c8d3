import random
from typing import Optional

from randmap.errors import HandleRangeError

HANDLE_BITS = 64
HANDLE_MAX = (1 << HANDLE_BITS) - 1


class Handle:
    """
    Opaque identifier returned by `RandMap.insert`.

    Only equality and hashing are meaningful; there is deliberately no ordering.
    """

    __slots__ = ('_value',)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Handle value must be an int, got {type(value).__name__}")
        if not 0 <= value <= HANDLE_MAX:
            raise HandleRangeError(f"Handle value {value} does not fit in {HANDLE_BITS} bits")
        self._value = value

    @classmethod
    def from_int(cls, value: int) -> 'Handle':
        return cls(value)

    def as_int(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __hash__(self):
        # value is already uniformly random
        return hash(self._value)

    def __eq__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented
        return self._value == other._value

    def __setattr__(self, name, value):
        if hasattr(self, '_value'):
            raise AttributeError(f"{self.__class__.__name__} is immutable")
        object.__setattr__(self, name, value)

    def __reduce__(self):
        return (self.__class__, (self._value,))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0x{self._value:0{HANDLE_BITS // 4}x})"


class HandleGenerator:
    """Draws handles uniformly from the full handle range. Not cryptographically secure."""

    __slots__ = ('_rng',)

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise TypeError("Pass either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    def generate(self) -> Handle:
        return Handle(self._rng.getrandbits(HANDLE_BITS))
