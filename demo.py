#!/usr/bin/env python3
"""
DNS Facade - Demo Script

This script demonstrates the DNS facade against two mock providers: one
that keeps zone names unique and has no geo support, and one that allows
duplicate zone names and supports every record-set profile.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dns_facade import DNSClient, ResourceRecordSet, Weighted, ZoneNotFoundError

console = Console()

UNIQUE_NAMES_CONFIG = {
    "default_provider": "mock",
    "dns_providers": {
        "mock": {
            "supports_geo": False,
            "zones": [{"name": "denominator.io."}],
            "record_sets": {
                "denominator.io.": [
                    {"name": "www.denominator.io.", "type": "A", "ttl": 300,
                     "records": ["192.0.2.1"]},
                ]
            },
        }
    },
}

DUPLICATE_NAMES_CONFIG = {
    "default_provider": "mock",
    "dns_providers": {
        "mock": {
            "supports_duplicate_zone_names": True,
            "zones": [
                {"name": "denominator.io.", "id": "Z1"},
                {"name": "denominator.io.", "id": "Z2"},
            ],
            "record_sets": {
                "Z1": [
                    {"name": "www.denominator.io.", "type": "A", "ttl": 300,
                     "records": ["192.0.2.1"]},
                    {"name": "www.denominator.io.", "type": "CNAME", "qualifier": "EU",
                     "records": ["eu.denominator.io."],
                     "geo": {"Europe": ["Germany", "France"]}},
                ]
            },
        }
    },
}


def display_demo_header():
    """Display the demo header."""
    console.print(
        Panel.fit(
            "[bold blue]DNS Facade - Demo[/bold blue]\n"
            "[cyan]One API over providers with different capabilities[/cyan]",
            border_style="blue",
        )
    )
    console.print()


def display_capabilities(api):
    """Show which record-set flavors the provider hands out."""
    table = Table(title=f"Capabilities of {api.provider.name}")
    table.add_column("Flavor", style="cyan")
    table.add_column("Available", style="magenta")

    zone = next(iter(api.zones)).id_or_name
    table.add_row("basic", "yes")
    table.add_row("all profiles", "yes")
    table.add_row("geo", "yes" if api.geo_record_sets_in_zone(zone) else "no")
    table.add_row("weighted", "yes" if api.weighted_record_sets_in_zone(zone) else "no")
    console.print(table)
    console.print()


def display_record_sets(api, zone):
    """Display every record set in a zone."""
    table = Table(title=f"Record sets in {zone}")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Qualifier", style="yellow")
    table.add_column("Records", style="green")

    for rrset in api.record_sets_in_zone(zone):
        table.add_row(rrset.name, rrset.type, rrset.qualifier or "", ", ".join(rrset.records))

    console.print(table)
    console.print()


def run_unique_names_demo():
    console.print("[bold]Provider with unique zone names[/bold]")
    api = DNSClient(UNIQUE_NAMES_CONFIG).api
    display_capabilities(api)
    console.print(f"'denominator.io.' resolves to: {api.id_or_name('denominator.io.')}")
    display_record_sets(api, "denominator.io.")


def run_duplicate_names_demo():
    console.print("[bold]Provider with duplicate zone names[/bold]")
    api = DNSClient(DUPLICATE_NAMES_CONFIG).api
    display_capabilities(api)
    console.print(f"'denominator.io.' resolves to: {api.id_or_name('denominator.io.')}")

    weighted = api.weighted_record_sets_in_zone("denominator.io.")
    weighted.put(
        ResourceRecordSet(
            name="api.denominator.io.",
            type="A",
            qualifier="blue",
            records=["192.0.2.10"],
            weighted=Weighted(weight=70),
        )
    )
    display_record_sets(api, "Z1")

    try:
        api.id_or_name("missing.io.")
    except ZoneNotFoundError as e:
        console.print(f"[red]✗ {e}[/red]")
    console.print()


def main():
    display_demo_header()
    run_unique_names_demo()
    run_duplicate_names_demo()
    console.print("[green]✓ Demo completed[/green]")


if __name__ == "__main__":
    main()
