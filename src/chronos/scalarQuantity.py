from dataclasses import dataclass, field
from typing import Self

from chronos.core import Category, UnitValue, fracDigs
from chronos.repSpec import RepSpec, canonicalRep
from chronos.scalar import ScalarValue


@dataclass(frozen=True, eq=False, repr=False)
class ScalarQuantity:
    """
    Common holder for Duration, Moment and Interval.

    Owns one ScalarValue and forwards construction, read-only queries,
    formatting and comparison to it. Comparison only works between two
    quantities of the same kind. No arithmetic operators live here: each
    kind declares exactly the ones that make sense for it, so a type checker
    rejects everything else (and Python raises TypeError at run time).
    """
    scalar: ScalarValue = field(default_factory=ScalarValue)

    def __post_init__(self) -> None:
        # Wrapping another quantity would smuggle its kind across
        if not isinstance(self.scalar, ScalarValue):
            raise TypeError(
                f"{type(self).__name__} wraps a ScalarValue, not {type(self.scalar).__name__}")

    # ---- construction ----

    @classmethod
    def fromParts(cls, s: int, ss: int = 0, spec: RepSpec = canonicalRep) -> Self:
        return cls(ScalarValue.fromParts(s, ss, spec))

    @classmethod
    def fromFraction(cls, s: int, num: int, den: int, spec: RepSpec = canonicalRep) -> Self:
        return cls(ScalarValue.fromFraction(s, num, den, spec))

    @classmethod
    def fromFloat(cls, x: float, spec: RepSpec = canonicalRep) -> Self:
        return cls(ScalarValue.fromFloat(x, spec))

    @classmethod
    def fromCategory(cls, cat: Category, spec: RepSpec = canonicalRep) -> Self:
        return cls(ScalarValue.fromCategory(cat, spec))

    @classmethod
    def fromValue(cls, other: Self, spec: RepSpec = canonicalRep) -> Self:
        # Only converts width, never kind
        if type(other) is not cls:
            raise TypeError(f"cannot make {cls.__name__} from {type(other).__name__}")
        return cls(ScalarValue.fromValue(other.scalar, spec))

    # ---- forwarded queries ----

    def category(self) -> Category:
        return self.scalar.category()

    def isNumber(self) -> bool:
        return self.scalar.isNumber()

    def isSpecial(self) -> bool:
        return self.scalar.isSpecial()

    def isNaN(self) -> bool:
        return self.scalar.isNaN()

    def isInfinite(self) -> bool:
        return self.scalar.isInfinite()

    def isPositiveInfinity(self) -> bool:
        return self.scalar.isPositiveInfinity()

    def isNegativeInfinity(self) -> bool:
        return self.scalar.isNegativeInfinity()

    def isNegative(self) -> bool:
        return self.scalar.isNegative()

    def seconds(self) -> int:
        return self.scalar.seconds()

    def subseconds(self) -> int:
        return self.scalar.subseconds()

    def value(self) -> UnitValue:
        return self.scalar.value()

    def spec(self) -> RepSpec:
        return self.scalar.spec()

    def toFloat(self) -> float:
        return self.scalar.toFloat()

    def inc(self) -> Self:
        return type(self)(self.scalar.inc())

    def dec(self) -> Self:
        return type(self)(self.scalar.dec())

    # ---- comparison within a kind ----

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.scalar == other.scalar

    def __lt__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.scalar < other.scalar

    def __le__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.scalar <= other.scalar

    def __gt__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.scalar > other.scalar

    def __ge__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.scalar >= other.scalar

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.scalar))

    # ---- formatting ----

    def toDecimal(self, places: int = fracDigs) -> str:
        return self.scalar.toDecimal(places)

    def elapsedStr(self) -> str:
        return self.scalar.elapsedStr()

    def dump(self) -> str:
        return self.scalar.dump()

    def __str__(self) -> str:
        return str(self.scalar)

    def __format__(self, spec: str) -> str:
        return format(self.scalar, spec)

    def __repr__(self) -> str:
        if self.isSpecial():
            return f"{type(self).__name__}({self.category()})"
        s, ss = self.value()
        return f"{type(self).__name__}(seconds={s}, subseconds={ss})"
