from typing import Self

from chronos.core import NaN, NegInf, PicosPerSecond, PosInf, Category, UnitValue
from chronos.repSpec import RepSpec, canonicalRep


# Canonical representation of linear time.
#
# Stores a signed count of wholes and fractions. By default these are exactly
# seconds and picoseconds, 64 bits each. The extreme values of the wholes are
# reserved for NaN and the infinities, see SecondsTraits. This class handles
# rollover, sign cleanup and saturation, but no arithmetic.
#
# The fractions have to be signed because the wholes have no negative zero.
# Their signs must match, or one of them must be zero. A positive fraction
# given with negative wholes takes on their sign. A negative fraction given
# with positive wholes is a conflict and yields NaN; it is never corrected.
#
# A narrower RepSpec shrinks the wholes field, which then saturates sooner.
# Whatever the storage, seconds() and subseconds() always report canonical
# seconds and picoseconds, with the 64-bit sentinels for special values.
class CanonRep:
    __slots__ = ("spec", "_wholes", "_fractions")

    def __init__(self, spec: RepSpec = canonicalRep) -> None:
        self.spec = spec
        self._wholes = 0
        self._fractions = 0

    @classmethod
    def fromParts(cls, s: int, ss: int = 0, spec: RepSpec = canonicalRep) -> Self:
        rep = cls(spec)
        rep.setValue(s, ss)
        return rep

    @classmethod
    def fromRaw(cls, wholes: int, fractions: int = 0, spec: RepSpec = canonicalRep) -> Self:
        # Store fields as given, with no rollover, sign cleanup or saturation
        rep = cls(spec)
        rep._wholes = wholes
        rep._fractions = fractions
        return rep

    def copy(self, spec: RepSpec | None = None) -> "CanonRep":
        # Copy into another storage policy, re-saturating as needed
        return CanonRep.fromParts(*self.value(), spec=spec or self.spec)

    # ---- canonical properties ----

    def seconds(self) -> int:
        w = self._wholes
        if self.spec.isCanonical:
            return w
        # Scale narrow sentinels up to the canonical ones
        traits = self.spec.traits
        if w > traits.Max:
            return PosInf
        if w < traits.Min:
            return NaN if w == traits.NaN else NegInf
        return w

    def setSeconds(self, s: int) -> None:
        self.setValue(s, self._fractions)

    def subseconds(self) -> int:
        return self._fractions

    def setSubseconds(self, ss: int) -> None:
        self.setValue(self.seconds(), ss)

    def value(self) -> UnitValue:
        return UnitValue(self.seconds(), self.subseconds())

    def setValue(self, s: int, ss: int = 0) -> None:
        # Clean up the signs first so the halves are compatible
        if s < 0 and ss > 0:
            ss = -ss
        elif s > 0 and ss < 0:
            s = NaN
        self._store(s, ss)

    def category(self) -> Category:
        return self.spec.traits.classify(self._wholes)

    def setCategory(self, cat: Category) -> None:
        match cat:
            case Category.Num:
                self.setValue(0, 0)
            case Category.NaN:
                # Conflicting signs are the canonical invalid value
                self.setValue(+1, -1)
            case Category.NegInf:
                self.setValue(NegInf, 0)
            case Category.PosInf:
                self.setValue(PosInf, 0)

    # ---- raw storage ----

    def wholes(self) -> int:
        return self._wholes

    def fractions(self) -> int:
        return self._fractions

    def isNegative(self) -> bool:
        return self._wholes < 0 or self._fractions < 0

    def _store(self, s: int, ss: int) -> None:
        # Store with rollover and saturation
        traits = self.spec.traits
        if s == NaN:
            # Nobody puts NaN in a corner
            self._wholes = traits.NaN
            self._fractions = 0
            return

        # Roll excess subseconds over into seconds, truncating toward zero
        if ss <= -PicosPerSecond or ss >= PicosPerSecond:
            carry = abs(ss) // PicosPerSecond
            if ss < 0:
                carry = -carry
            s += carry
            ss -= carry * PicosPerSecond

        if s > traits.Max:
            s, ss = traits.PosInf, 0
        elif s < traits.Min:
            s, ss = traits.NegInf, 0
        self._wholes = s
        self._fractions = ss

    def dump(self) -> str:
        # Raw fields in two's-complement hex, then their widths in bytes
        wholesBits = self.spec.wholesBits
        fractionsBits = self.spec.fractionsBits
        w = self._wholes & (2 ** wholesBits - 1)
        f = self._fractions & (2 ** fractionsBits - 1)
        return f"{w:x}.{f:x} <{wholesBits // 8}:{fractionsBits // 8}>"

    def __repr__(self) -> str:
        return f"CanonRep(wholes={self._wholes}, fractions={self._fractions}, " \
            f"wholesBits={self.spec.wholesBits})"
