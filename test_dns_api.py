#!/usr/bin/env python3
"""
Test suite for the DNSApi facade

Covers zone resolution and the capability-gated record-set accessors.
"""

import logging
import unittest
from unittest.mock import MagicMock

from dns_facade.core.dns_api import DNSApi
from dns_facade.core.model import Zone
from dns_facade.core.provider import Provider
from dns_facade.exceptions import InvalidZoneIdError, ZoneNotFoundError
from dns_facade.providers.mock_provider import MockDNSProvider


def duplicate_names_provider(**overrides):
    config = {
        "supports_duplicate_zone_names": True,
        "zones": [
            {"name": "a.com", "id": "1"},
            {"name": "a.com", "id": "2"},
        ],
    }
    config.update(overrides)
    return MockDNSProvider(config)


class TestUniqueZoneNames(unittest.TestCase):
    """Resolution when the provider keeps zone names unique."""

    def setUp(self):
        self.mock = MockDNSProvider({"zones": [{"name": "a.com"}]})
        self.api = self.mock.dns_api()

    def test_id_or_name_is_identity(self):
        """Names come back unchanged without listing zones."""
        for name in ["a.com", "missing.com", "A.COM", "denominator.io."]:
            with self.subTest(name=name):
                self.assertEqual(self.api.id_or_name(name), name)
        self.assertEqual(self.mock.zones().listings, 0)

    def test_record_set_accessors_do_not_list_zones(self):
        """Accessors bind the value as given."""
        self.assertEqual(self.api.basic_record_sets_in_zone("a.com").zone_id, "a.com")
        self.assertEqual(self.api.record_sets_in_zone("other.com").zone_id, "other.com")
        self.assertEqual(self.api.geo_record_sets_in_zone("a.com").zone_id, "a.com")
        self.assertEqual(self.api.weighted_record_sets_in_zone("a.com").zone_id, "a.com")
        self.assertEqual(self.mock.zones().listings, 0)


class TestDuplicateZoneNames(unittest.TestCase):
    """Resolution when the provider allows several zones with one name."""

    def setUp(self):
        self.mock = duplicate_names_provider()
        self.api = self.mock.dns_api()

    def test_first_match_wins(self):
        """The first zone in listing order is chosen."""
        self.assertEqual(self.api.id_or_name("a.com"), "1")

    def test_resolution_is_repeatable(self):
        """Each call lists the zones again and returns the same id."""
        results = [self.api.id_or_name("a.com") for _ in range(5)]
        self.assertEqual(results, ["1"] * 5)
        self.assertEqual(self.mock.zones().listings, 5)

    def test_missing_zone(self):
        """A missing name raises with the name and every zone examined."""
        with self.assertRaises(ZoneNotFoundError) as ctx:
            self.api.id_or_name("missing.com")

        self.assertEqual(ctx.exception.zone_name, "missing.com")
        self.assertEqual(len(ctx.exception.zones), 2)
        self.assertIn("missing.com", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_match_is_case_sensitive(self):
        """No normalization is applied to zone names."""
        with self.assertRaises(ZoneNotFoundError):
            self.api.id_or_name("A.COM")
        with self.assertRaises(ZoneNotFoundError):
            self.api.id_or_name("a.com.")

    def test_listing_order_decides(self):
        """Reordering the listing changes the winner."""
        mock = duplicate_names_provider(
            zones=[{"name": "a.com", "id": "2"}, {"name": "a.com", "id": "1"}]
        )
        self.assertEqual(mock.dns_api().id_or_name("a.com"), "2")

    def test_duplicate_names_logged(self):
        """Ambiguous names are reported at debug level."""
        with self.assertLogs("dns_facade.core.dns_api", level=logging.DEBUG) as logs:
            self.api.id_or_name("a.com")
        self.assertTrue(any("2 zones named a.com" in line for line in logs.output))

    def test_zone_without_id_is_rejected(self):
        """A provider with duplicate names must give every zone an id."""
        mock = duplicate_names_provider(zones=[{"name": "a.com"}])
        with self.assertRaises(ZoneNotFoundError):
            mock.dns_api().id_or_name("a.com")

    def test_accessors_resolve_names(self):
        """Record-set accessors bind the resolved id."""
        self.assertEqual(self.api.basic_record_sets_in_zone("a.com").zone_id, "1")
        self.assertEqual(self.api.record_sets_in_zone("a.com").zone_id, "1")
        self.assertEqual(self.api.geo_record_sets_in_zone("a.com").zone_id, "1")
        self.assertEqual(self.api.weighted_record_sets_in_zone("a.com").zone_id, "1")

    def test_accessors_keep_existing_ids(self):
        """A value that already is a zone id is used as-is."""
        self.assertEqual(self.api.basic_record_sets_in_zone("2").zone_id, "2")
        self.assertEqual(self.api.weighted_record_sets_in_zone("2").zone_id, "2")

    def test_accessors_list_zones_once_per_call(self):
        self.api.basic_record_sets_in_zone("a.com")
        self.assertEqual(self.mock.zones().listings, 1)

    def test_accessor_with_missing_zone(self):
        with self.assertRaises(ZoneNotFoundError) as ctx:
            self.api.record_sets_in_zone("missing.com")
        self.assertEqual(ctx.exception.zone_name, "missing.com")


class TestCapabilities(unittest.TestCase):
    """Optional record-set flavors."""

    def test_geo_unsupported_is_absent(self):
        """Unsupported geo returns None on every call, without listing zones."""
        mock = duplicate_names_provider(supports_geo=False)
        api = mock.dns_api()

        for zone_id in ["1", "2", "1"]:
            with self.subTest(zone_id=zone_id):
                self.assertIsNone(api.geo_record_sets_in_zone(zone_id))
        self.assertEqual(mock.zones().listings, 0)

    def test_weighted_unsupported_is_absent(self):
        api = MockDNSProvider({"supports_weighted": False}).dns_api()
        self.assertIsNone(api.weighted_record_sets_in_zone("a.com"))

    def test_weighted_handles_are_independent(self):
        """Handles are bound to one zone each and share no state."""
        api = duplicate_names_provider().dns_api()

        first = api.weighted_record_sets_in_zone("1")
        second = api.weighted_record_sets_in_zone("2")

        self.assertEqual(first.zone_id, "1")
        self.assertEqual(second.zone_id, "2")
        self.assertIsNot(first, second)
        self.assertIsNot(api.weighted_record_sets_in_zone("1"), first)

    def test_basic_and_all_profile_always_present(self):
        api = MockDNSProvider({"supports_geo": False, "supports_weighted": False}).dns_api()
        self.assertIsNotNone(api.basic_record_sets_in_zone("a.com"))
        self.assertIsNotNone(api.record_sets_in_zone("a.com"))


class TestInvalidArguments(unittest.TestCase):
    """Structurally invalid zone identifiers."""

    def test_invalid_ids_rejected(self):
        api = duplicate_names_provider(supports_geo=False).dns_api()
        accessors = [
            api.basic_record_sets_in_zone,
            api.record_sets_in_zone,
            api.geo_record_sets_in_zone,
            api.weighted_record_sets_in_zone,
        ]
        for accessor in accessors:
            for value in [None, "", "   ", 42]:
                with self.subTest(accessor=accessor.__name__, value=value):
                    with self.assertRaises(InvalidZoneIdError):
                        accessor(value)


class TestWiring(unittest.TestCase):
    """DNSApi delegates to the factories it was built with."""

    def setUp(self):
        self.provider = Provider(name="fake", supports_duplicate_zone_names=True)
        self.zones = MagicMock()
        self.zones.__iter__.side_effect = lambda: iter([Zone("a.com", "Z9")])
        self.basic = MagicMock()
        self.all_profile = MagicMock()
        self.geo = MagicMock(supported=True, capability="geo")
        self.weighted = MagicMock(supported=False, capability="weighted")
        self.weighted.create.return_value = None
        self.api = DNSApi(
            self.provider, self.zones, self.basic, self.all_profile, self.geo, self.weighted
        )

    def test_zones_accessor(self):
        self.assertIs(self.api.zones, self.zones)
        self.assertIs(self.api.provider, self.provider)

    def test_delegation(self):
        self.assertIs(
            self.api.basic_record_sets_in_zone("a.com"), self.basic.create.return_value
        )
        self.basic.create.assert_called_once_with("Z9")

        self.api.record_sets_in_zone("Z9")
        self.all_profile.create.assert_called_once_with("Z9")

        self.api.geo_record_sets_in_zone("a.com")
        self.geo.create.assert_called_once_with("Z9")

    def test_unsupported_factory_gets_raw_value(self):
        self.assertIsNone(self.api.weighted_record_sets_in_zone("a.com"))
        self.weighted.create.assert_called_once_with("a.com")
        self.zones.__iter__.assert_not_called()


if __name__ == "__main__":
    unittest.main()
