from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

# However a scalar time is stored, it is exposed canonically as a signed
# count of seconds plus a signed count of picoseconds under a second.
#
# The seconds are a 64-bit value with a few numbers at the extremes reserved
# for special values (see SecondsTraits). The picoseconds only need 40 bits to
# reach 1e12, so anything beyond that is at least a full second and gets
# carried into the seconds. That also keeps them well inside the 53 bits a
# float holds exactly.

# Idealized clock with no time zones, leap seconds, leap days or other
# civil time features.
PicosPerSecond = 1_000_000_000_000
NanosPerSecond = 1_000_000_000
MicrosPerSecond = 1_000_000
MillisPerSecond = 1_000
SecondsPerMinute = 60
SecondsPerHour = SecondsPerMinute * 60
SecondsPerDay = SecondsPerHour * 24
SecondsPerYear = SecondsPerDay * 365

fracDigs = 12  # log10 of PicosPerSecond


class UnitValue(NamedTuple):
    s: int   # seconds
    ss: int  # subseconds, in picoseconds, same sign as s unless one is zero


class Category(Enum):
    Num = 0
    NaN = 1
    NegInf = 2
    PosInf = 3

    def __str__(self) -> str:
        return categoryNames[self]


categoryNames: dict[Category, str] = {
    Category.Num: "Num",
    Category.NaN: "NaN",
    Category.NegInf: "-Inf",
    Category.PosInf: "+Inf",
}


@dataclass(frozen=True)
class SecondsTraits:
    """
    Partitions a signed wholes field to make room for NaN and the infinities.

    Magic values for a 16-bit field:
      7FFF =  32767 PosInf
      7FFE =  32766 Max
      0000 =      0
      8002 = -32766 Min
      8001 = -32767 NegInf
      8000 = -32768 NaN

    Min is -Max, so negating any number never lands on the raw minimum.
    """
    bits: int = 64

    @property
    def PosInf(self) -> int:
        return 2 ** (self.bits - 1) - 1

    @property
    def Max(self) -> int:
        return self.PosInf - 1

    @property
    def Min(self) -> int:
        return -self.Max

    @property
    def NegInf(self) -> int:
        return -self.PosInf

    @property
    def NaN(self) -> int:
        return -(2 ** (self.bits - 1))

    def classify(self, s: int) -> Category:
        # Get category from seconds value
        if s >= self.PosInf:
            return Category.PosInf
        if s > self.NegInf:
            return Category.Num
        if s > self.NaN:
            return Category.NegInf
        return Category.NaN

    @staticmethod
    def combine(catL: Category, catR: Category) -> Category:
        # Resolve categories under addition
        if catL == Category.Num and catR == Category.Num:
            return Category.Num
        if catL == Category.NaN or catR == Category.NaN:
            return Category.NaN
        if catL in (Category.PosInf, Category.NegInf):
            if catR == Category.Num or catR == catL:
                return catL
            return Category.NaN
        return catR


SecondsTraits64 = SecondsTraits(64)

# Canonical sentinels, used for all externally visible seconds
NaN = SecondsTraits64.NaN
NegInf = SecondsTraits64.NegInf
PosInf = SecondsTraits64.PosInf
Max = SecondsTraits64.Max
Min = SecondsTraits64.Min


def classify(s: int) -> Category:
    return SecondsTraits64.classify(s)


def combine(catL: Category, catR: Category) -> Category:
    return SecondsTraits.combine(catL, catR)
