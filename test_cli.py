#!/usr/bin/env python3
"""
Test suite for the dns-facade command line interface.
"""

import importlib
import io
import os
import tempfile
import unittest
from unittest.mock import patch

import yaml
from rich.console import Console

# The package re-exports main(), which shadows the module attribute
cli = importlib.import_module("dns_facade.cli.main")

CONFIG = {
    "default_provider": "mock",
    "dns_providers": {
        "mock": {
            "supports_duplicate_zone_names": True,
            "supports_weighted": False,
            "zones": [
                {"name": "a.com.", "id": "Z1"},
                {"name": "a.com.", "id": "Z2"},
            ],
            "record_sets": {
                "Z1": [
                    {"name": "www.a.com.", "type": "A", "ttl": 300, "records": ["192.0.2.1"]},
                    {"name": "www.a.com.", "type": "A", "qualifier": "EU",
                     "records": ["192.0.2.2"], "geo": {"Europe": ["France"]}},
                ]
            },
        }
    },
}


class TestCLI(unittest.TestCase):
    """Run CLI commands against a mock provider configuration."""

    def setUp(self):
        with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False) as f:
            yaml.dump(CONFIG, f)
            self.config_file = f.name
        self.output = io.StringIO()
        patches = [
            patch.object(cli, "console", Console(file=self.output, width=200)),
            patch.object(cli, "config_logger"),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

    def tearDown(self):
        os.unlink(self.config_file)

    def run_cli(self, *args):
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--config", self.config_file, *args])
        return ctx.exception.code, self.output.getvalue()

    def test_zones(self):
        code, output = self.run_cli("zones")
        self.assertEqual(code, 0)
        self.assertIn("Z1", output)
        self.assertIn("Z2", output)

    def test_resolve(self):
        code, output = self.run_cli("resolve", "a.com.")
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "Z1")

    def test_resolve_missing_zone(self):
        code, output = self.run_cli("resolve", "missing.com.")
        self.assertEqual(code, 1)
        self.assertIn("zone missing.com. not found", output)

    def test_basic_records(self):
        code, output = self.run_cli("records", "a.com.")
        self.assertEqual(code, 0)
        self.assertIn("192.0.2.1", output)
        self.assertNotIn("192.0.2.2", output)
        self.assertIn("Total record sets: 1", output)

    def test_all_records(self):
        code, output = self.run_cli("records", "Z1", "--all")
        self.assertEqual(code, 0)
        self.assertIn("192.0.2.2", output)
        self.assertIn("Total record sets: 2", output)

    def test_geo_records(self):
        code, output = self.run_cli("geo", "a.com.", "--name", "www.a.com.")
        self.assertEqual(code, 0)
        self.assertIn("EU", output)
        self.assertIn("geo: Europe", output)

    def test_weighted_unsupported(self):
        code, output = self.run_cli("weighted", "a.com.")
        self.assertEqual(code, 1)
        self.assertIn("does not support weighted record sets", output)

    def test_providers(self):
        code, output = self.run_cli("providers")
        self.assertEqual(code, 0)
        self.assertIn("bind", output)
        self.assertIn("mock", output)

    def test_providers_with_broken_bind_section(self):
        config = dict(CONFIG, dns_providers=dict(CONFIG["dns_providers"], bind={"zones": ["not a zone"]}))
        with open(self.config_file, "w") as f:
            yaml.dump(config, f)
        code, output = self.run_cli("providers")
        self.assertEqual(code, 0)
        self.assertIn("bind", output)


class TestConfig(unittest.TestCase):
    """Test configuration loading."""

    def test_missing_config_uses_defaults(self):
        config = cli.load_config("/nonexistent/config.yaml")
        self.assertEqual(config, cli.get_default_config())

    def test_invalid_config_exits(self):
        with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False) as f:
            f.write("default_provider: [mock\n")
            path = f.name
        try:
            with patch.object(cli, "console", Console(file=io.StringIO())):
                with self.assertRaises(SystemExit) as ctx:
                    cli.load_config(path)
            self.assertEqual(ctx.exception.code, 1)
        finally:
            os.unlink(path)

    def test_empty_config(self):
        with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False) as f:
            path = f.name
        try:
            self.assertEqual(cli.load_config(path), {})
        finally:
            os.unlink(path)


if __name__ == "__main__":
    unittest.main()
