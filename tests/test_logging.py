"""
Tests for the package logging setup.
"""

import logging
import unittest

from skyangle.conversion import conversion_for


class TestPackageLogging(unittest.TestCase):
    """Test the DEBUG records and the silent default handler."""

    def test_null_handler_installed(self):
        """Test the package logger carries a NullHandler."""
        handlers = logging.getLogger("skyangle").handlers
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in handlers))

    def test_resolution_is_logged(self):
        """Test resolving a capability emits a DEBUG record."""
        with self.assertLogs("skyangle", level="DEBUG") as logs:
            conversion_for(1.0)
        self.assertTrue(any("Resolved Float64Conversion" in line for line in logs.output))

    def test_sequence_resolution_is_logged(self):
        """Test the record names the payload type."""
        with self.assertLogs("skyangle.conversion", level="DEBUG") as logs:
            conversion_for([1.0, 2.0])
        self.assertIn(
            "DEBUG:skyangle.conversion.conversion_base:Resolved Float64SequenceConversion for list",
            logs.output,
        )


if __name__ == "__main__":
    unittest.main()
