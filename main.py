#!/usr/bin/env python3
"""
DNS Facade - Main Entry Point

This is the main entry point for the DNS facade CLI.
It can be run directly or imported as a module.
"""

from dns_facade.cli.main import main

if __name__ == "__main__":
    main()
