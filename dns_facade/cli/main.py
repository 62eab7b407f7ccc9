#!/usr/bin/env python3
"""
DNS Facade - Command Line Interface

Main entry point for the dns-facade CLI.
"""

import argparse
import logging
import sys
from typing import Dict, Iterable, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.model import ResourceRecordSet
from ..exceptions import DNSFacadeError
from ..providers.dns_client import PROVIDERS, DNSClient

console = Console()
logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    config_logger(config, verbose=args.verbose)

    try:
        status = args.handler(args, config)
    except (DNSFacadeError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if args.verbose:
            console.print_exception()
        sys.exit(1)

    sys.exit(status)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DNS Facade - manage zones and record sets on any DNS provider"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    providers = subparsers.add_parser("providers", help="List registered providers")
    providers.set_defaults(handler=list_providers)

    zones = subparsers.add_parser("zones", help="List zones of the configured provider")
    zones.set_defaults(handler=list_zones)

    resolve = subparsers.add_parser("resolve", help="Show the id the provider expects for a zone")
    resolve.add_argument("zone", help="Zone id or name")
    resolve.set_defaults(handler=resolve_zone)

    records = subparsers.add_parser("records", help="List record sets in a zone")
    records.add_argument("zone", help="Zone id or name")
    records.add_argument("--name", "-n", help="Only record sets with this name")
    records.add_argument(
        "--all", "-a", action="store_true", help="Include geo, weighted and other profiles"
    )
    records.set_defaults(handler=list_records)

    geo = subparsers.add_parser("geo", help="List geo record sets in a zone")
    geo.add_argument("zone", help="Zone id or name")
    geo.add_argument("--name", "-n", help="Only record sets with this name")
    geo.set_defaults(handler=list_geo_records)

    weighted = subparsers.add_parser("weighted", help="List weighted record sets in a zone")
    weighted.add_argument("zone", help="Zone id or name")
    weighted.add_argument("--name", "-n", help="Only record sets with this name")
    weighted.set_defaults(handler=list_weighted_records)

    return parser


def list_providers(args, config: Dict) -> int:
    table = Table(title="DNS Providers")
    table.add_column("Provider", style="cyan")
    table.add_column("Duplicate Zone Names", style="magenta")
    table.add_column("Geo", style="magenta")
    table.add_column("Weighted", style="magenta")

    for name in sorted(PROVIDERS):
        provider_config = config.get("dns_providers", {}).get(name) or {}
        descriptor = PROVIDERS[name].describe(provider_config)
        table.add_row(
            name,
            _yes_no(descriptor.supports_duplicate_zone_names),
            _yes_no(descriptor.supports_geo),
            _yes_no(descriptor.supports_weighted),
        )

    console.print(table)
    return 0


def list_zones(args, config: Dict) -> int:
    api = DNSClient(config).api
    table = Table(title=f"Zones ({api.provider.name})")
    table.add_column("Name", style="cyan")
    table.add_column("Id", style="white")

    for zone in api.zones:
        table.add_row(zone.name, zone.id or "")

    console.print(table)
    return 0


def resolve_zone(args, config: Dict) -> int:
    api = DNSClient(config).api
    console.print(api.id_or_name(args.zone))
    return 0


def list_records(args, config: Dict) -> int:
    api = DNSClient(config).api
    if args.all:
        records = api.record_sets_in_zone(args.zone)
    else:
        records = api.basic_record_sets_in_zone(args.zone)
    rrsets = records.iterate_by_name(args.name) if args.name else iter(records)
    _print_record_sets(f"Record sets in {records.zone_id}", rrsets)
    return 0


def list_geo_records(args, config: Dict) -> int:
    api = DNSClient(config).api
    records = api.geo_record_sets_in_zone(args.zone)
    if records is None:
        console.print(f"[yellow]{api.provider.name} does not support geo record sets[/yellow]")
        return 1
    rrsets = records.iterate_by_name(args.name) if args.name else iter(records)
    _print_record_sets(f"Geo record sets in {records.zone_id}", rrsets)
    return 0


def list_weighted_records(args, config: Dict) -> int:
    api = DNSClient(config).api
    records = api.weighted_record_sets_in_zone(args.zone)
    if records is None:
        console.print(
            f"[yellow]{api.provider.name} does not support weighted record sets[/yellow]"
        )
        return 1
    rrsets = records.iterate_by_name(args.name) if args.name else iter(records)
    _print_record_sets(f"Weighted record sets in {records.zone_id}", rrsets)
    return 0


def _print_record_sets(title: str, rrsets: Iterable[ResourceRecordSet]):
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Qualifier", style="white")
    table.add_column("TTL", style="white")
    table.add_column("Profile", style="white")
    table.add_column("Records", style="green")

    count = 0
    for rrset in rrsets:
        table.add_row(
            rrset.name,
            rrset.type,
            rrset.qualifier or "",
            "" if rrset.ttl is None else str(rrset.ttl),
            _profile(rrset),
            ", ".join(rrset.records),
        )
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total record sets: {count}[/bold]")


def _profile(rrset: ResourceRecordSet) -> str:
    if rrset.geo is not None:
        return "geo: " + ", ".join(sorted(rrset.geo.regions))
    if rrset.weighted is not None:
        return f"weight: {rrset.weighted.weight}"
    return ""


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        console.print(f"[red]Error parsing config file {config_path}: {escape(str(e))}[/red]")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
        "logging": {"level": "INFO"},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
    handlers = [logging.StreamHandler(sys.stdout)]

    log_file = logging_config.get("file")
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    main()
