from chronos.canonRep import CanonRep
from chronos.config import Config, configureLogging, loadConfig, saveConfig
from chronos.core import (
    Category,
    Max,
    Min,
    NaN,
    NegInf,
    PicosPerSecond,
    PosInf,
    SecondsTraits,
    UnitValue,
    classify,
    combine,
)
from chronos.duration import Duration
from chronos.interval import Interval
from chronos.moment import Moment
from chronos.repSpec import RepSpec, canonicalRep
from chronos.scalar import ScalarValue

__all__ = [
    "CanonRep",
    "Category",
    "Config",
    "Duration",
    "Interval",
    "Max",
    "Min",
    "Moment",
    "NaN",
    "NegInf",
    "PicosPerSecond",
    "PosInf",
    "RepSpec",
    "ScalarValue",
    "SecondsTraits",
    "UnitValue",
    "canonicalRep",
    "classify",
    "combine",
    "configureLogging",
    "loadConfig",
    "saveConfig",
]
