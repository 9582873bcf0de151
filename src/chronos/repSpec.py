from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from chronos.core import PicosPerSecond, SecondsTraits


class RepSpec(BaseModel):
    """
    Storage policy for a CanonRep.

    wholesBits may narrow the seconds field (8, 16, 32 or 64 bits). The other
    fields are the scaling hooks: a narrow field could count years instead of
    seconds, or hundredths instead of picoseconds. Only the 1:1 scale and
    64-bit picosecond fractions are supported; validation rejects the rest.
    """
    # keep field names in lowerCamelCase (no underscores)
    model_config = ConfigDict(frozen=True)

    wholesBits: int = 64
    fractionsBits: int = 64
    secondsPerWhole: int = 1
    fractionsPerSecond: int = PicosPerSecond

    @field_validator("wholesBits")
    @classmethod
    def checkWholesBits(cls, v: int) -> int:
        if v not in (8, 16, 32, 64):
            raise ValueError(f"wholesBits must be 8, 16, 32 or 64, not {v}")
        return v

    @field_validator("fractionsBits")
    @classmethod
    def checkFractionsBits(cls, v: int) -> int:
        # XXX Narrow fractions need the picosecond scaling to be finished
        if v != 64:
            raise ValueError(f"only 64-bit fractions are supported, not {v}")
        return v

    @field_validator("secondsPerWhole")
    @classmethod
    def checkSecondsPerWhole(cls, v: int) -> int:
        if v != 1:
            raise ValueError(f"wholes must count single seconds, not {v}")
        return v

    @field_validator("fractionsPerSecond")
    @classmethod
    def checkFractionsPerSecond(cls, v: int) -> int:
        if v != PicosPerSecond:
            raise ValueError(f"fractions must count picoseconds, not 1/{v} s")
        return v

    @property
    def traits(self) -> SecondsTraits:
        return SecondsTraits(self.wholesBits)

    @property
    def isCanonical(self) -> bool:
        return self.wholesBits == 64


canonicalRep = RepSpec()
