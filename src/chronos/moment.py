from dataclasses import dataclass
from typing import overload

from chronos.duration import Duration
from chronos.scalarQuantity import ScalarQuantity


# Instant in time, as an offset from an implied epoch.
#
# Moments only move by Durations, and the distance between two Moments is a
# Duration. There is deliberately no Moment + Moment, no -Moment and no
# Moment * int.
@dataclass(frozen=True, eq=False, repr=False)
class Moment(ScalarQuantity):

    def __add__(self, other: Duration) -> "Moment":
        if not isinstance(other, Duration):
            return NotImplemented
        return Moment(self.scalar + other.scalar)

    def __radd__(self, other: Duration) -> "Moment":
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> "Moment": ...

    @overload
    def __sub__(self, other: "Moment") -> Duration: ...

    def __sub__(self, other: "Duration | Moment") -> "Moment | Duration":
        if isinstance(other, Moment):
            return Duration(self.scalar - other.scalar)
        if isinstance(other, Duration):
            return Moment(self.scalar - other.scalar)
        return NotImplemented
