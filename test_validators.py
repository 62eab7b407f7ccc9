#!/usr/bin/env python3
"""
Test suite for the validation helpers.
"""

import unittest

from dns_facade.exceptions import InvalidZoneIdError
from dns_facade.utils.validators import (
    check_zone_id,
    validate_fqdn,
    validate_ttl,
    validate_zone_id,
    validate_zone_name,
)


class TestValidators(unittest.TestCase):
    """Test the validation functions."""

    def test_validate_zone_id(self):
        """Zone ids are any non-empty string."""
        for value in ["Z1", "a.com", "denominator.io.", "/hostedzone/Z1"]:
            with self.subTest(value=value):
                self.assertTrue(validate_zone_id(value))
        for value in [None, "", "  ", 7, b"Z1"]:
            with self.subTest(value=value):
                self.assertFalse(validate_zone_id(value))

    def test_check_zone_id(self):
        self.assertEqual(check_zone_id("Z1"), "Z1")
        with self.assertRaises(InvalidZoneIdError) as ctx:
            check_zone_id("")
        self.assertEqual(ctx.exception.zone_id, "")
        self.assertIsInstance(ctx.exception, ValueError)

    def test_validate_fqdn_valid(self):
        """Test valid FQDN validation."""
        valid_fqdns = [
            "example.com",
            "example.com.",
            "sub.example.com",
            "_sip._tcp.example.com.",
            "*.example.com.",
            "123.example.com",
        ]

        for fqdn in valid_fqdns:
            with self.subTest(fqdn=fqdn):
                self.assertTrue(validate_fqdn(fqdn))

    def test_validate_fqdn_invalid(self):
        """Test invalid FQDN validation."""
        invalid_fqdns = [
            "",  # Empty
            "single",  # Single label
            ".example.com",  # Starts with dot
            "example..com",  # Consecutive dots
            "example-.com",  # Ends with hyphen
            "-example.com",  # Starts with hyphen
            "a" * 64 + ".com",  # Label too long
        ]

        for fqdn in invalid_fqdns:
            with self.subTest(fqdn=fqdn):
                self.assertFalse(validate_fqdn(fqdn))

    def test_validate_zone_name(self):
        self.assertTrue(validate_zone_name("denominator.io."))
        self.assertFalse(validate_zone_name("*.denominator.io."))
        self.assertFalse(validate_zone_name(None))

    def test_validate_ttl(self):
        for ttl in [0, 300, 2147483647]:
            with self.subTest(ttl=ttl):
                self.assertTrue(validate_ttl(ttl))
        for ttl in [-1, 2147483648, "300", True, None]:
            with self.subTest(ttl=ttl):
                self.assertFalse(validate_ttl(ttl))


if __name__ == "__main__":
    unittest.main()
