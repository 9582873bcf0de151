import logging
import math
from dataclasses import dataclass, field
from typing import Self

from chronos.canonRep import CanonRep
from chronos.core import (
    Category,
    Max,
    Min,
    NaN,
    NegInf,
    PicosPerSecond,
    PosInf,
    UnitValue,
    classify,
    combine,
    fracDigs,
)
from chronos.repSpec import RepSpec, canonicalRep
from chronos.safeMath import INT64_MAX, INT64_MIN, addWithCarry, div128, mul128, mulFits64


def checkInt(name: str, x: object) -> int:
    if not isinstance(x, int) or isinstance(x, bool):
        raise TypeError(f"'{name}' must be an integer, not {type(x).__name__}")
    return x


# Scalar value underlying both absolute and relative times.
#
# The value is a signed offset on a linear (TAI-like) time scale, so leap
# seconds, time zones and calendars are somebody else's problem.
#
# The special values follow IEEE float semantics where they can. NaN absorbs
# everything and is never equal to anything, itself included. Infinities are
# unchanged by addition of numbers, equal to themselves, and ordered beyond
# all numbers; adding opposite infinities gives NaN. Overflow saturates to
# the infinity of the right sign, it never wraps and never raises.
#
# Values are immutable; arithmetic always returns a new canonical 64/64 value.
@dataclass(frozen=True, eq=False, repr=False)
class ScalarValue:
    canon: CanonRep = field(default_factory=CanonRep)

    # ---- construction ----

    @classmethod
    def fromParts(cls, s: int, ss: int = 0, spec: RepSpec = canonicalRep) -> Self:
        checkInt("s", s)
        checkInt("ss", ss)
        return cls(CanonRep.fromParts(s, ss, spec))

    @classmethod
    def fromFraction(cls, s: int, num: int, den: int, spec: RepSpec = canonicalRep) -> Self:
        # N.B. No rounding: the fraction of a second is truncated toward zero
        checkInt("num", num)
        checkInt("den", den)
        if den == 0:
            raise ZeroDivisionError("fraction with zero denominator")
        ss = abs(num * PicosPerSecond) // abs(den)
        if (num < 0) != (den < 0):
            ss = -ss
        return cls.fromParts(s, ss, spec)

    @classmethod
    def fromFloat(cls, x: float, spec: RepSpec = canonicalRep) -> Self:
        """Construct from floating point seconds.

        Warning: This is neither precise nor fast. The whole part is split off
        by truncation, then the remainder is scaled and truncated to
        picoseconds, so binary float error shows up in the last digits.
        """
        if math.isnan(x):
            return cls.fromCategory(Category.NaN, spec)
        if math.isinf(x):
            return cls.fromCategory(Category.PosInf if x > 0 else Category.NegInf, spec)
        s = math.trunc(x)
        if s < Min or s > Max:
            # includes -2**63, which would otherwise land on the NaN sentinel
            logging.warning("ScalarValue: %r is out of range, saturating", x)
            return cls.fromCategory(Category.PosInf if s > 0 else Category.NegInf, spec)
        return cls.fromParts(s, int((x - s) * PicosPerSecond), spec)

    @classmethod
    def fromCategory(cls, cat: Category, spec: RepSpec = canonicalRep) -> Self:
        canon = CanonRep(spec)
        canon.setCategory(cat)
        return cls(canon)

    @classmethod
    def fromValue(cls, other: "ScalarValue", spec: RepSpec = canonicalRep) -> Self:
        # Copy from a value of any storage width, saturating to the new one
        if not isinstance(other, ScalarValue):
            raise TypeError(f"cannot make {cls.__name__} from {type(other).__name__}")
        return cls(other.canon.copy(spec))

    # ---- limits ----

    @classmethod
    def getPositiveInfinity(cls) -> Self:
        return cls.fromCategory(Category.PosInf)

    @classmethod
    def getNegativeInfinity(cls) -> Self:
        return cls.fromCategory(Category.NegInf)

    @classmethod
    def getNaN(cls) -> Self:
        return cls.fromParts(+1, -1)

    @classmethod
    def maxValue(cls) -> Self:
        return cls.fromParts(Max, PicosPerSecond - 1)

    @classmethod
    def minValue(cls) -> Self:
        return cls.fromParts(Min, -(PicosPerSecond - 1))

    @classmethod
    def epsilon(cls) -> Self:
        return cls.fromParts(0, 1)

    # ---- categories ----

    def category(self) -> Category:
        return classify(self.seconds())

    def isNumber(self) -> bool:
        # Has a numerical value, as opposed to a special one
        return NegInf < self.seconds() < PosInf

    def isSpecial(self) -> bool:
        return not self.isNumber()

    def isNaN(self) -> bool:
        return self.seconds() == NaN

    def isInfinite(self) -> bool:
        s = self.seconds()
        return s > Max or (s < Min and s != NaN)

    def isPositiveInfinity(self) -> bool:
        return self.seconds() > Max

    def isNegativeInfinity(self) -> bool:
        s = self.seconds()
        return s < Min and s != NaN

    def isNegative(self) -> bool:
        s, ss = self.value()
        return s != NaN and (s < 0 or ss < 0)

    # ---- accessors ----

    def seconds(self) -> int:
        return self.canon.seconds()

    def subseconds(self) -> int:
        return self.canon.subseconds()

    def value(self) -> UnitValue:
        return self.canon.value()

    def spec(self) -> RepSpec:
        return self.canon.spec

    def toFloat(self) -> float:
        # Imprecise, for display and rough math only
        match self.category():
            case Category.NaN:
                return math.nan
            case Category.PosInf:
                return math.inf
            case Category.NegInf:
                return -math.inf
        s, ss = self.value()
        return s + ss / PicosPerSecond

    # ---- arithmetic ----

    @classmethod
    def _commit(cls, s: int, ss: int) -> "ScalarValue":
        # Saturate here, since a wrapped sum can land right on the NaN sentinel
        if s > Max:
            return cls.fromCategory(Category.PosInf)
        if s < Min:
            return cls.fromCategory(Category.NegInf)
        return cls(CanonRep.fromParts(s, ss))

    def __neg__(self) -> "ScalarValue":
        # NaN stays NaN, infinities swap sides
        if self.isNaN():
            return ScalarValue.fromCategory(Category.NaN)
        s, ss = self.value()
        return ScalarValue(CanonRep.fromParts(-s, -ss))

    def __pos__(self) -> "ScalarValue":
        return ScalarValue.fromValue(self)

    def __abs__(self) -> "ScalarValue":
        return -self if self.isNegative() else ScalarValue.fromValue(self)

    def __add__(self, other: "ScalarValue") -> "ScalarValue":
        if not isinstance(other, ScalarValue):
            return NotImplemented

        # If either is special, so is the result
        catL, catR = self.category(), other.category()
        if catL != Category.Num or catR != Category.Num:
            cat = combine(catL, catR)
            if cat == Category.NaN and catL != Category.NaN and catR != Category.NaN:
                logging.debug("ScalarValue: %s + %s is NaN", catL, catR)
            return ScalarValue.fromCategory(cat)

        sL, ssL = self.value()
        sR, ssR = other.value()

        # Subseconds first, holding back any whole second they produce
        ss = ssL + ssR
        adjust = 0
        if ss >= PicosPerSecond:
            ss -= PicosPerSecond
            adjust = +1
        elif ss <= -PicosPerSecond:
            ss += PicosPerSecond
            adjust = -1

        s, carry = addWithCarry(sL, sR)
        if carry == 0 and adjust:
            s, carry = addWithCarry(s, adjust)
        if carry:
            logging.debug("ScalarValue: %r + %r overflowed, carry %d", self, other, carry)
            return ScalarValue.fromCategory(Category.PosInf if carry > 0 else Category.NegInf)

        # Restore sign agreement between the halves by moving one second
        if s > 0 and ss < 0:
            s -= 1
            ss += PicosPerSecond
        elif s < 0 and ss > 0:
            s += 1
            ss -= PicosPerSecond

        result = ScalarValue._commit(s, ss)
        if result.isInfinite():
            logging.debug("ScalarValue: %r + %r saturated to %s", self, other, result.category())
        return result

    def __sub__(self, other: "ScalarValue") -> "ScalarValue":
        if not isinstance(other, ScalarValue):
            return NotImplemented
        return self + (-other)

    def mulInt(self, m: int) -> "ScalarValue":
        """Scale by an integer factor.

        - Zero gives zero, even for special values.
        - Otherwise special values are returned unchanged.
        - Overflow saturates to the infinity with the sign of the product.
        The subseconds are scaled through a 128-bit product so no picoseconds
        are lost on the way to the seconds.
        """
        checkInt("m", m)
        if m < INT64_MIN or m > INT64_MAX:
            raise OverflowError(f"multiplier {m} exceeds 64 bits")
        if m == 0:
            return ScalarValue()
        if self.isSpecial():
            return ScalarValue.fromValue(self)

        s, ss = self.value()
        negative = self.isNegative() != (m < 0)
        overflow = Category.NegInf if negative else Category.PosInf

        hi, lo = mul128(s, m)
        if not mulFits64(hi, lo) or lo > Max or lo < Min:
            logging.debug("ScalarValue: %r * %d saturated to %s", self, m, overflow)
            return ScalarValue.fromCategory(overflow)
        scaledSecs = lo

        # Split the scaled subseconds into whole seconds and leftover picoseconds
        hi, lo = mul128(ss, m)
        carrySecs, picos = div128(hi, lo, PicosPerSecond)
        if picos != 0 and (picos < 0) != negative:
            # The halves disagree on the sign of the product
            logging.debug("ScalarValue: %r * %d lost its sign, using NaN", self, m)
            return ScalarValue.fromCategory(Category.NaN)

        s, carry = addWithCarry(scaledSecs, carrySecs)
        if carry:
            logging.debug("ScalarValue: %r * %d overflowed, carry %d", self, m, carry)
            return ScalarValue.fromCategory(overflow)
        return ScalarValue._commit(s, picos)

    def inc(self) -> "ScalarValue":
        return self + ScalarValue.fromParts(1)

    def dec(self) -> "ScalarValue":
        return self + ScalarValue.fromParts(-1)

    # ---- comparison ----

    def compare(self, other: "ScalarValue") -> int | None:
        """Three-way compare: -1, 0 or +1, or None when unordered (NaN)."""
        l, r = self.value(), other.value()
        if l.s == NaN or r.s == NaN:
            return None
        return (l > r) - (l < r)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarValue):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "ScalarValue") -> bool:
        if not isinstance(other, ScalarValue):
            return NotImplemented
        c = self.compare(other)
        return c is not None and c < 0

    def __le__(self, other: "ScalarValue") -> bool:
        if not isinstance(other, ScalarValue):
            return NotImplemented
        c = self.compare(other)
        return c is not None and c <= 0

    def __gt__(self, other: "ScalarValue") -> bool:
        if not isinstance(other, ScalarValue):
            return NotImplemented
        c = self.compare(other)
        return c is not None and c > 0

    def __ge__(self, other: "ScalarValue") -> bool:
        if not isinstance(other, ScalarValue):
            return NotImplemented
        c = self.compare(other)
        return c is not None and c >= 0

    def __hash__(self) -> int:
        return hash(self.value())

    # ---- formatting ----

    def toDecimal(self, places: int = fracDigs) -> str:
        # Signed decimal seconds, rounding half to even when places < fracDigs
        if places < 0 or places > fracDigs:
            raise ValueError(f"places must be between 0 and {fracDigs}")
        if self.isSpecial():
            return str(self.category())
        s, ss = self.value()
        sign = "-" if self.isNegative() else ""
        whole, fracPs = abs(s), abs(ss)

        if places == fracDigs:
            digits = fracPs
        else:
            scale = 10 ** (fracDigs - places)
            q, rem = divmod(fracPs, scale)
            # with no places left, ties go to the even whole
            odd = (q if places else whole) & 1
            if rem * 2 > scale or (rem * 2 == scale and odd == 1):
                q += 1
            if q == 10 ** places:  # rounded up to 1.000… so carry into whole
                q = 0
                whole += 1
            digits = q

        if places == 0:
            return f"{sign}{whole}"
        return f"{sign}{whole}.{digits:0{places}d}"

    def elapsedStr(self) -> str:
        if self.isSpecial():
            return str(self.category())
        # only whole positive seconds get an explicit sign
        sign = "+" if self.seconds() > 0 else ""
        return f"{sign}{self.toDecimal()}s"

    def dump(self) -> str:
        return f"{self.elapsedStr()} [{self.canon.dump()}]"

    def __str__(self) -> str:
        return self.elapsedStr()

    def __format__(self, spec: str) -> str:
        # custom mini-format:
        #   E = elapsed seconds, D = debug dump with raw fields, A = automatic (default)
        spec = (spec or "A").upper()
        if spec == "E":
            return self.elapsedStr()
        if spec == "D":
            return self.dump()
        if spec != "A":
            logging.warning("%s: unknown format spec %r", type(self).__name__, spec)
        return str(self)

    def __repr__(self) -> str:
        if self.isSpecial():
            return f"{type(self).__name__}({self.category()})"
        s, ss = self.value()
        return f"{type(self).__name__}(seconds={s}, subseconds={ss})"
