import unittest
import warnings

import numpy as np
import numpy.testing as npt
import sympy
from scipy import special

from specfun import poch

PRECISION = 1e-14

ABSOLUTE_KNOWN_VALUES = (
    # Weird edge values
    (0.0, 0.0, 1.0),
    (0.0, 0.25, 0.0),
    (-1.0, 0.0, 1.0),
    (-1.0, 0.25, 0.0),
    # gamma(-1)/gamma(-2) is undefined, but the recursion rule writes it as
    # -2 gamma(-2)/gamma(-2). SciPy agrees.
    (-2.0, 1.0, -2.0),
)

# SciPy 1.10.1 and Wolfram Alpha
KNOWN_VALUES = (
    (0.5, 0.5, 0.56418958354775639030),
    (0.5, 1.0, 0.5),
    (1.0, 0.5, 0.88622692545275794096),
    (1.5, 1.0, 1.5),
    (1.0, 1.5, 1.32934038817913702246),
    (1.5, 1.5, 2.25675833419102511712),
    (2.5, 2.5, 18.05406667352819738426),
    (150.00001, np.pi, 7015772.59900571219623088837),
    (np.pi / 2.0, np.pi, 17.63940522158362397144),
    (-34.54, -2.4, 0.000959271152790991576995792318463),
    (-1.5, -0.22, 1.099148632503722270901806),
)


class PochIntegerTest(unittest.TestCase):
    def test0_FactorialRatios(self):
        for i in range(1, 10):
            for m in range(0, 5):
                expected = float(sympy.factorial(i + m - 1)) / float(sympy.factorial(i - 1))
                self.assertEqual(poch(float(i), float(m)), expected)

    def test1_FactorialRatiosFloat32(self):
        for i in range(1, 10):
            for m in range(0, 5):
                expected = np.float32(sympy.factorial(i + m - 1) / sympy.factorial(i - 1))
                self.assertEqual(poch(np.float32(i), np.float32(m)), expected)

    def test2_NegativeSteps(self):
        # gamma(x - 2) / gamma(x) = 1 / ((x - 1)(x - 2))
        self.assertEqual(poch(5.0, -2.0), 1.0 / 12.0)
        self.assertEqual(poch(-3.0, -1.0), -0.25)


class PochKnownValuesTest(unittest.TestCase):
    def test0_AbsoluteValues(self):
        for x, m, expected in ABSOLUTE_KNOWN_VALUES:
            self.assertEqual(poch(x, m), expected, (x, m))

    def test1_KnownValues(self):
        for x, m, expected in KNOWN_VALUES:
            npt.assert_allclose(poch(x, m), expected, rtol=1e-13, err_msg=str((x, m)))

    def test2_HalfHalf(self):
        npt.assert_allclose(poch(0.5, 0.5), 0.56418958354775639030, rtol=PRECISION)

    def test3_NegativeArgumentLiteral(self):
        # differences two log-gamma values near -90
        npt.assert_allclose(poch(-34.54, -2.4), 0.000959271152790991576995792318463, rtol=PRECISION)

    def test4_Undefined(self):
        self.assertTrue(np.isnan(poch(-2.2, 0.2)))
        self.assertTrue(np.isnan(poch(-2.5, 0.5)))

    def test5_FormallyZero(self):
        self.assertEqual(poch(-3.0, 0.5), 0.0)
        self.assertEqual(poch(0.0, -0.5), 0.0)

    def test6_HighPrecisionReference(self):
        for x, m in ((sympy.Rational(5, 2), sympy.Rational(5, 2)),
                     (sympy.Rational(1, 3), sympy.Rational(7, 4)),
                     (sympy.Rational(-7, 3), sympy.Rational(1, 5))):
            expected = float((sympy.gamma(x + m) / sympy.gamma(x)).evalf(30))
            npt.assert_allclose(poch(float(x), float(m)), expected, rtol=1e-13)


class PochRegimeTest(unittest.TestCase):
    def test0_MatchesScipyGrid(self):
        for x in np.linspace(0.1, 60.0, 41):
            for m in np.linspace(-0.9, 7.3, 23):
                npt.assert_allclose(poch(x, m), special.poch(x, m), rtol=1e-12,
                                    err_msg=str((x, m)))

    def test1_AsymptoticExpansion(self):
        for x, m in ((2.0e4, 0.5), (1.0e5, -0.5), (3.0e4, 2.75), (5.0e6, 0.125)):
            npt.assert_allclose(poch(x, m), special.poch(x, m), rtol=1e-13)
        # gamma(x + 1/2) / gamma(x) ~ sqrt(x) (1 - 1/8x)
        npt.assert_allclose(poch(1.0e6, 0.5), 1.0e3 * (1.0 - 1.0 / 8.0e6), rtol=1e-13)

    def test2_AsymptoticExpansionIsLogged(self):
        with self.assertLogs("specfun.gamma.poch", level="DEBUG") as logs:
            poch(2.0e4, 0.5)
        self.assertIn("asymptotic", logs.output[-1])

    def test3_OverflowIsSilent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertEqual(poch(10.0, 400.0), np.inf)
            self.assertEqual(poch(np.float32(10.0), np.float32(60.0)), np.inf)

    def test4_NanPropagates(self):
        self.assertTrue(np.isnan(poch(np.nan, 2.0)))
        self.assertTrue(np.isnan(poch(1.5, np.nan)))

    def test5_Float32(self):
        result = poch(np.float32(0.5), np.float32(0.5))
        self.assertIsInstance(result, np.float32)
        npt.assert_allclose(result, 0.56418958354775639030, rtol=1e-6)
        npt.assert_allclose(poch(np.float32(2.5), np.float32(2.5)), 18.054066673528197, rtol=1e-5)

    def test6_MixedWidths(self):
        self.assertIsInstance(poch(np.float32(1.5), 1.0), np.float32)
        self.assertIsInstance(poch(np.float32(1.5), np.float64(1.0)), np.float64)
        self.assertIsInstance(poch(1.5, 1), np.float64)

    def test7_RejectsArrays(self):
        with self.assertRaises(TypeError):
            poch(np.array([1.0, 2.0]), 1.0)


if __name__ == "__main__":
    unittest.main()
