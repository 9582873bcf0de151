from dataclasses import dataclass

from chronos.scalarQuantity import ScalarQuantity


# Interval between two moments, kept apart from Duration: intervals combine
# only with each other and cannot be scaled.
@dataclass(frozen=True, eq=False, repr=False)
class Interval(ScalarQuantity):

    def __neg__(self) -> "Interval":
        return Interval(-self.scalar)

    def __add__(self, other: "Interval") -> "Interval":
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self.scalar + other.scalar)

    def __sub__(self, other: "Interval") -> "Interval":
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self.scalar - other.scalar)
