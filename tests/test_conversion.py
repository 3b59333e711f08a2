"""
Tests for the radian conversion capabilities.
"""

import math
import unittest

import numpy as np

from skyangle.config import tolerance_for
from skyangle.conversion import (
    OPERATIONS,
    Conversion,
    Float32Conversion,
    Float32SequenceConversion,
    Float64Conversion,
    Float64SequenceConversion,
    conversion_for,
    from_arcsec,
    from_degree,
    to_mas,
)
from skyangle.exceptions import SkyAngleError, UnsupportedPayloadError

UNIT_PAIRS = [
    ("from_degree", "to_degree"),
    ("from_arcmin", "to_arcmin"),
    ("from_arcsec", "to_arcsec"),
    ("from_mas", "to_mas"),
]
SAMPLES = [0.0, 1e-6, 0.5, 1.0, 45.0, -12.3, 359.9, 1e6]


class TestScalarConversion(unittest.TestCase):
    """Test the scalar capabilities."""

    def test_degree_primitive(self):
        """Test degree <-> radian uses the native primitive."""
        self.assertEqual(Float64Conversion.from_degree(180.0), np.deg2rad(180.0))
        self.assertEqual(Float64Conversion.to_degree(math.pi), np.rad2deg(math.pi))
        self.assertAlmostEqual(float(Float64Conversion.from_degree(90.0)), math.pi / 2)

    def test_ladder_is_composed(self):
        """Test every derived conversion calls its neighbour on the ladder."""
        for conversion in (Float64Conversion, Float32Conversion):
            x = conversion.DTYPE(123.456)
            sixty = conversion.DTYPE(60.0)
            with self.subTest(conversion=conversion.__name__):
                self.assertEqual(conversion.from_arcmin(x), conversion.from_degree(x / sixty))
                self.assertEqual(conversion.from_arcsec(x), conversion.from_arcmin(x / sixty))
                self.assertEqual(
                    conversion.from_mas(x), conversion.from_arcsec(x * conversion.DTYPE(1e-3))
                )
                self.assertEqual(conversion.to_arcmin(x), sixty * conversion.to_degree(x))
                self.assertEqual(conversion.to_arcsec(x), sixty * conversion.to_arcmin(x))
                self.assertEqual(
                    conversion.to_mas(x), conversion.DTYPE(1000.0) * conversion.to_arcsec(x)
                )

    def test_ladder_consistency(self):
        """Test mas, arcsec, arcmin and degree agree up to their factors."""
        for x in [1e-9, 0.01, 1.0, math.pi, -2.5]:
            mas = Float64Conversion.to_mas(x)
            np.testing.assert_allclose(mas, 1000.0 * Float64Conversion.to_arcsec(x), rtol=1e-12)
            np.testing.assert_allclose(mas, 60000.0 * Float64Conversion.to_arcmin(x), rtol=1e-12)
            np.testing.assert_allclose(mas, 3_600_000.0 * Float64Conversion.to_degree(x), rtol=1e-12)

    def test_ladder_consistency_single(self):
        """Test the single precision ladder agrees up to its factors."""
        for x in [1e-9, 0.01, 1.0, math.pi, -2.5]:
            x = np.float32(x)
            mas = Float32Conversion.to_mas(x)
            self.assertEqual(mas.dtype, np.float32)
            np.testing.assert_allclose(mas, 1000.0 * Float32Conversion.to_arcsec(x), rtol=1e-5)
            np.testing.assert_allclose(mas, 60000.0 * Float32Conversion.to_arcmin(x), rtol=1e-5)
            np.testing.assert_allclose(mas, 3_600_000.0 * Float32Conversion.to_degree(x), rtol=1e-5)

    def test_round_trip_double(self):
        """Test unit -> radian -> unit reproduces the input in double precision."""
        for to_rad, from_rad in UNIT_PAIRS:
            for x in SAMPLES:
                back = getattr(Float64Conversion, from_rad)(getattr(Float64Conversion, to_rad)(x))
                np.testing.assert_allclose(back, x, rtol=1e-9, err_msg=to_rad)

    def test_round_trip_single(self):
        """Test unit -> radian -> unit reproduces the input in single precision."""
        for to_rad, from_rad in UNIT_PAIRS:
            for x in SAMPLES:
                x32 = np.float32(x)
                back = getattr(Float32Conversion, from_rad)(getattr(Float32Conversion, to_rad)(x32))
                np.testing.assert_allclose(back, x32, rtol=1e-5, err_msg=to_rad)

    def test_width_is_preserved(self):
        """Test results stay in the capability's width."""
        for name in OPERATIONS:
            self.assertEqual(getattr(Float32Conversion, name)(np.float32(2.0)).dtype, np.float32)
            self.assertEqual(getattr(Float32Conversion, name)(2.0).dtype, np.float32)
            self.assertEqual(getattr(Float64Conversion, name)(2.0).dtype, np.float64)

    def test_cross_width_agreement(self):
        """Test single and double precision agree for exactly representable inputs."""
        for to_rad, from_rad in UNIT_PAIRS:
            for x in [0.5, 1.0, 90.0, 180.0, 3600.0]:
                single = getattr(Float32Conversion, to_rad)(np.float32(x))
                double = getattr(Float64Conversion, to_rad)(x)
                np.testing.assert_allclose(single, double, rtol=tolerance_for(np.float32))
                single = getattr(Float32Conversion, from_rad)(np.float32(x))
                double = getattr(Float64Conversion, from_rad)(x)
                np.testing.assert_allclose(single, double, rtol=tolerance_for(np.float32))

    def test_nan_and_inf_propagate(self):
        """Test IEEE special values flow through unchanged."""
        self.assertTrue(math.isnan(Float64Conversion.from_mas(float("nan"))))
        self.assertTrue(math.isinf(Float64Conversion.to_mas(float("inf"))))
        self.assertTrue(math.isinf(Float64Conversion.from_degree(float("-inf"))))

    def test_capability_is_not_instantiable(self):
        """Test capabilities are used through their classmethods only."""
        with self.assertRaises(TypeError):
            Float64Conversion()


class TestSequenceConversion(unittest.TestCase):
    """Test the element-wise capabilities."""

    def test_bulk_equals_scalar(self):
        """Test bulk conversion matches the scalar conversion per element."""
        pairs = [
            (Float64SequenceConversion, Float64Conversion),
            (Float32SequenceConversion, Float32Conversion),
        ]
        for bulk, scalar in pairs:
            for n in (0, 1, 7):
                values = [0.25 * i - 1.0 for i in range(n)]
                for name in OPERATIONS:
                    result = getattr(bulk, name)(values)
                    expected = np.array(
                        [getattr(scalar, name)(v) for v in values], dtype=scalar.DTYPE
                    )
                    self.assertEqual(result.dtype, scalar.DTYPE)
                    np.testing.assert_array_equal(result, expected)

    def test_empty_sequence(self):
        """Test an empty sequence converts to an empty array."""
        result = Float64SequenceConversion.from_arcmin([])
        self.assertIsInstance(result, np.ndarray)
        self.assertEqual(result.shape, (0,))
        self.assertEqual(Float32SequenceConversion.to_mas(()).dtype, np.float32)

    def test_order_and_length_preserved(self):
        """Test element order and length are kept."""
        result = Float64SequenceConversion.to_degree([0.0, math.pi, math.pi / 2])
        np.testing.assert_allclose(result, [0.0, 180.0, 90.0])

    def test_owned_input_is_not_modified(self):
        """Test an owned list or array is left untouched."""
        values = [3600.0, 7200.0]
        Float64SequenceConversion.from_arcsec(values)
        self.assertEqual(values, [3600.0, 7200.0])

        array = np.array([1.0, 2.0])
        result = Float64SequenceConversion.to_arcmin(array)
        np.testing.assert_array_equal(array, [1.0, 2.0])
        self.assertFalse(np.shares_memory(array, result))

    def test_borrowed_view_is_accepted(self):
        """Test read-only views (tuple, memoryview, read-only array) convert."""
        base = np.array([60.0, 120.0], dtype=np.float32)
        base.flags.writeable = False
        for view in ((60.0, 120.0), memoryview(base), base[:]):
            result = Float32SequenceConversion.from_arcmin(view)
            self.assertTrue(result.flags.writeable)
            np.testing.assert_allclose(result, np.deg2rad([1.0, 2.0]), rtol=1e-6)

    def test_scalar_is_rejected(self):
        """Test a bare scalar is not a sequence."""
        with self.assertRaises(UnsupportedPayloadError):
            Float64SequenceConversion.to_mas(1.0)


class TestConversionResolution(unittest.TestCase):
    """Test conversion_for and the module-level helpers."""

    def test_resolves_scalars(self):
        """Test scalar payloads resolve by width."""
        self.assertIs(conversion_for(1.0), Float64Conversion)
        self.assertIs(conversion_for(3), Float64Conversion)
        self.assertIs(conversion_for(np.float64(1.0)), Float64Conversion)
        self.assertIs(conversion_for(np.float32(1.0)), Float32Conversion)
        self.assertIs(conversion_for(1.0, dtype=np.float32), Float32Conversion)

    def test_resolves_sequences(self):
        """Test sequence payloads resolve to the element-wise capability."""
        self.assertIs(conversion_for([1.0, 2.0]), Float64SequenceConversion)
        self.assertIs(conversion_for([1, 2]), Float64SequenceConversion)
        self.assertIs(conversion_for(()), Float64SequenceConversion)
        self.assertIs(
            conversion_for(np.zeros(3, dtype=np.float32)), Float32SequenceConversion
        )
        self.assertIs(
            conversion_for((1.0, 2.0), dtype=np.float32), Float32SequenceConversion
        )
        self.assertIs(
            conversion_for(memoryview(np.zeros(2, dtype=np.float32))),
            Float32SequenceConversion,
        )

    def test_rejects_unsupported_payloads(self):
        """Test payloads outside the two widths are rejected."""
        unsupported = [
            np.float16(1.0),
            np.array([1, 2], dtype=np.int64),
            "1.0",
            True,
            [1.0j],
            None,
            memoryview(b"ab"),
            bytearray(b"ab"),
            np.int64(5),
            np.arange(3),
            10**400,
        ]
        for payload in unsupported:
            with self.subTest(payload=payload):
                with self.assertRaises(UnsupportedPayloadError):
                    conversion_for(payload)
        with self.assertRaises(UnsupportedPayloadError):
            conversion_for(1.0, dtype=np.float16)

    def test_accepts_float_buffers(self):
        """Test a memoryview over float64 data resolves to the sequence capability."""
        view = memoryview(np.array([1.0, 2.0]))
        self.assertIs(conversion_for(view), Float64SequenceConversion)

    def test_integer_payloads_can_be_cast(self):
        """Test NumPy integers resolve once a float width is given."""
        self.assertIs(conversion_for(np.arange(3), dtype=np.float64), Float64SequenceConversion)
        self.assertIs(conversion_for(np.int64(5), dtype=np.float32), Float32Conversion)

    def test_unsupported_payload_error_is_type_error(self):
        """Test the error fits both the package and the builtin hierarchy."""
        self.assertTrue(issubclass(UnsupportedPayloadError, TypeError))
        self.assertTrue(issubclass(UnsupportedPayloadError, SkyAngleError))

    def test_registry_is_closed(self):
        """Test only supported widths can register a capability."""
        with self.assertRaises(UnsupportedPayloadError):
            type("Float16Conversion", (Conversion,), {"DTYPE": np.float16})

    def test_module_level_helpers(self):
        """Test the width-agnostic helpers dispatch on their argument."""
        self.assertEqual(from_degree(180.0), Float64Conversion.from_degree(180.0))
        self.assertEqual(from_arcsec(np.float32(3600.0)).dtype, np.float32)
        np.testing.assert_array_equal(
            to_mas([0.0, 1.0]), Float64SequenceConversion.to_mas([0.0, 1.0])
        )


if __name__ == "__main__":
    unittest.main()
