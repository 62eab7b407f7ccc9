"""
Utility functions and helpers.

This package contains validation helpers shared by the facade
and the provider implementations.
"""

from .validators import (
    check_zone_id,
    validate_fqdn,
    validate_ttl,
    validate_zone_id,
    validate_zone_name,
)

__all__ = [
    "check_zone_id",
    "validate_fqdn",
    "validate_ttl",
    "validate_zone_id",
    "validate_zone_name",
]
