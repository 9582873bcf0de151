from dataclasses import dataclass

from chronos.scalarQuantity import ScalarQuantity


# Signed span of time, such as the difference between two moments.
#
# Durations add and subtract among themselves, negate, and scale by integers.
# Adding one to a Moment gives a Moment, see Moment.__radd__.
@dataclass(frozen=True, eq=False, repr=False)
class Duration(ScalarQuantity):

    def __neg__(self) -> "Duration":
        return Duration(-self.scalar)

    def __abs__(self) -> "Duration":
        return Duration(abs(self.scalar))

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.scalar + other.scalar)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.scalar - other.scalar)

    def __mul__(self, m: int) -> "Duration":
        if not isinstance(m, int) or isinstance(m, bool):
            return NotImplemented
        return Duration(self.scalar.mulInt(m))

    def __rmul__(self, m: int) -> "Duration":
        return self.__mul__(m)
