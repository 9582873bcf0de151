import unittest

from chronos.canonRep import CanonRep
from chronos.core import Category, Max, PicosPerSecond
from chronos.repSpec import RepSpec
from chronos.safeMath import INT64_MAX, INT64_MIN
from chronos.scalar import ScalarValue

Unit = ScalarValue.fromParts
HalfSecond = PicosPerSecond // 2
QuarterSecond = PicosPerSecond // 4
NaN = ScalarValue.fromCategory(Category.NaN)
PosInf = ScalarValue.fromCategory(Category.PosInf)
NegInf = ScalarValue.fromCategory(Category.NegInf)


class TestScalarAddSpecial(unittest.TestCase):
    def testNaNPlus(self) -> None:
        self.assertTrue((NaN + NaN).isNaN())
        self.assertTrue((NaN + Unit(1)).isNaN())
        self.assertTrue((Unit(1) + NaN).isNaN())
        self.assertTrue((NaN + PosInf).isNaN())

    def testNaNMinus(self) -> None:
        self.assertTrue((NaN - NaN).isNaN())
        self.assertTrue((NaN - Unit(1)).isNaN())
        self.assertTrue((Unit(1) - NaN).isNaN())

    def testInfinities(self) -> None:
        self.assertTrue((PosInf + PosInf).isPositiveInfinity())
        self.assertTrue((NegInf + NegInf).isNegativeInfinity())
        self.assertTrue((PosInf + Unit(-5)).isPositiveInfinity())
        self.assertTrue((Unit(5) + NegInf).isNegativeInfinity())
        self.assertTrue((PosInf + NegInf).isNaN())
        self.assertTrue((PosInf - PosInf).isNaN())
        self.assertTrue((PosInf - NegInf).isPositiveInfinity())


class TestScalarAddOverflow(unittest.TestCase):
    def testNegativeEdge(self) -> None:
        self.assertEqual((Unit(-Max + 1) + Unit(-1)).seconds(), -Max)
        self.assertTrue((Unit(-Max) + Unit(-1)).isNegativeInfinity())
        self.assertTrue((Unit(-Max + 2) + Unit(-3)).isNegativeInfinity())
        self.assertTrue((Unit(-Max) + Unit(-3)).isNegativeInfinity())
        self.assertTrue((Unit(-Max, PicosPerSecond - 1) + Unit(0, -1)).isNegativeInfinity())

    def testPositiveEdge(self) -> None:
        self.assertEqual((Unit(Max - 1) + Unit(1)).seconds(), Max)
        self.assertTrue((Unit(Max) + Unit(1)).isPositiveInfinity())
        self.assertTrue((Unit(Max - 2) + Unit(3)).isPositiveInfinity())
        self.assertTrue((Unit(Max) + Unit(3)).isPositiveInfinity())
        self.assertTrue((Unit(Max, PicosPerSecond - 1) + Unit(0, 1)).isPositiveInfinity())

    def testFullRangeSwing(self) -> None:
        self.assertEqual(Unit(Max) + Unit(-Max), Unit(0))
        self.assertTrue((Unit(Max) - Unit(-Max)).isPositiveInfinity())
        self.assertTrue((Unit(-Max) - Unit(Max)).isNegativeInfinity())

    def testLandingOnRawMinimumSaturates(self) -> None:
        # The wrapped sum equals the NaN sentinel but is a plain underflow
        half = INT64_MIN // 2
        self.assertTrue((Unit(half) + Unit(half)).isNegativeInfinity())


class TestScalarAddSignage(unittest.TestCase):
    def testTransientSignConflictRoundTrips(self) -> None:
        a = Unit(Max, 0)
        c = a + Unit(0, -2)
        self.assertEqual(c.value(), (Max - 1, PicosPerSecond - 2))
        self.assertEqual(c + Unit(0, 2), a)

        a = Unit(-Max, 0)
        c = a + Unit(0, 2)
        self.assertEqual(c + Unit(0, -2), a)

    def testFractionCarry(self) -> None:
        self.assertEqual(Unit(1, HalfSecond) + Unit(1, HalfSecond), Unit(3))
        self.assertEqual(ScalarValue.fromFraction(1, 1, 2) + ScalarValue.fromFraction(1, 1, 2),
            Unit(3))
        self.assertEqual(Unit(1, PicosPerSecond - 1) + Unit(1, PicosPerSecond - 1),
            Unit(3, PicosPerSecond - 2))
        self.assertEqual(Unit(-1, PicosPerSecond - 1) + Unit(-1, PicosPerSecond - 1),
            Unit(-3, PicosPerSecond - 2))

    def testMixedSigns(self) -> None:
        self.assertEqual(Unit(1, 3 * QuarterSecond) + Unit(1, QuarterSecond), Unit(3))
        self.assertEqual(Unit(-1, 3 * QuarterSecond) + Unit(-1, QuarterSecond), Unit(-3))
        self.assertEqual(Unit(1, 3 * QuarterSecond) + Unit(-1, QuarterSecond),
            Unit(0, HalfSecond))
        self.assertEqual(Unit(-1, 3 * QuarterSecond) + Unit(1, QuarterSecond),
            Unit(0, -HalfSecond))

    def testPicoBorrow(self) -> None:
        self.assertEqual(Unit(0, -1) + Unit(0, 1), Unit(0, 0))
        self.assertEqual(Unit(1) - Unit(0, 1), Unit(0, PicosPerSecond - 1))
        self.assertEqual(Unit(-1) + Unit(0, 1), Unit(0, -(PicosPerSecond - 1)))

    def testResultIsCanonical(self) -> None:
        spec8 = RepSpec(wholesBits=8)
        total = Unit(100, spec=spec8) + Unit(100, spec=spec8)
        self.assertEqual(total.seconds(), 200)
        self.assertTrue(total.spec().isCanonical)


class TestScalarNegate(unittest.TestCase):
    def testNegate(self) -> None:
        self.assertTrue((-NaN).isNaN())
        self.assertTrue((-PosInf).isNegativeInfinity())
        self.assertTrue((-NegInf).isPositiveInfinity())
        self.assertEqual(-Unit(1, 5), Unit(-1, -5))
        self.assertEqual(-Unit(-Max), Unit(Max))
        self.assertEqual(-Unit(0), Unit(0))

    def testAbs(self) -> None:
        self.assertEqual(abs(Unit(-1, -5)), Unit(1, 5))
        self.assertEqual(abs(Unit(0, 5)), Unit(0, 5))
        self.assertTrue(abs(NegInf).isPositiveInfinity())
        self.assertTrue(abs(NaN).isNaN())

    def testIncDec(self) -> None:
        self.assertEqual(Unit(1, 5).inc(), Unit(2, 5))
        self.assertEqual(Unit(0, 5).dec(), Unit(0, -(PicosPerSecond - 5)))
        self.assertTrue(Unit(Max).inc().isPositiveInfinity())
        self.assertTrue(NaN.inc().isNaN())


class TestScalarMultiply(unittest.TestCase):
    def testExactThroughWideProduct(self) -> None:
        self.assertEqual(Unit(0, 1).mulInt(INT64_MAX), Unit(9_223_372, 36_854_775_807))
        self.assertEqual(Unit(0, -1).mulInt(INT64_MAX), Unit(-9_223_372, -36_854_775_807))

    def testFractionCarriesIntoSeconds(self) -> None:
        self.assertEqual(Unit(1, HalfSecond).mulInt(2), Unit(3))
        self.assertEqual(Unit(-1, HalfSecond).mulInt(3), Unit(-4, -HalfSecond))
        self.assertEqual(Unit(1, HalfSecond).mulInt(-3), Unit(-4, -HalfSecond))
        self.assertEqual(Unit(-2, -QuarterSecond).mulInt(-4), Unit(9))

    def testZeroAbsorbs(self) -> None:
        for v in (Unit(5, 7), PosInf, NegInf, NaN):
            self.assertEqual(v.mulInt(0), Unit(0, 0))

    def testSpecialsUnchanged(self) -> None:
        self.assertTrue(PosInf.mulInt(-2).isPositiveInfinity())
        self.assertTrue(NegInf.mulInt(3).isNegativeInfinity())
        self.assertTrue(NaN.mulInt(7).isNaN())

    def testSaturation(self) -> None:
        self.assertTrue(Unit(Max).mulInt(2).isPositiveInfinity())
        self.assertTrue(Unit(Max).mulInt(-2).isNegativeInfinity())
        self.assertTrue(Unit(-5).mulInt(INT64_MAX).isNegativeInfinity())
        self.assertTrue(Unit(-5).mulInt(INT64_MIN).isPositiveInfinity())
        self.assertTrue(Unit(2 ** 62).mulInt(2).isPositiveInfinity())
        # Seconds alone fit, the carried fraction pushes them over
        self.assertTrue(Unit(Max // 2, PicosPerSecond - 1).mulInt(2).isPositiveInfinity())
        self.assertEqual(Unit(Max, HalfSecond).mulInt(1), Unit(Max, HalfSecond))

    def testFractionSignConflictIsNaN(self) -> None:
        # Raw storage can hold halves whose signs disagree; scaling them cannot
        # produce a consistent product
        self.assertTrue(ScalarValue(CanonRep.fromRaw(-1, 5)).mulInt(2).isNaN())
        self.assertTrue(ScalarValue(CanonRep.fromRaw(1, -5)).mulInt(2).isNaN())
        self.assertTrue(ScalarValue(CanonRep.fromRaw(-1, 5)).mulInt(-3).isNaN())

    def testBadMultipliers(self) -> None:
        with self.assertRaises(TypeError):
            Unit(1).mulInt(1.5)  # type: ignore[arg-type]
        with self.assertRaises(OverflowError):
            Unit(1).mulInt(2 ** 64)
        with self.assertRaises(TypeError):
            Unit(1).mulInt(True)


if __name__ == "__main__":
    unittest.main(verbosity=2)
