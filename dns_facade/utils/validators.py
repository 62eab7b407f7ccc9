"""
Validators - Input validation for zones and record sets

This module provides validation functions for zone identifiers, zone names
and record-set fields shared by the facade and the providers.
"""

import logging
import re

from ..exceptions import InvalidZoneIdError

logger = logging.getLogger(__name__)

MAX_TTL = 2147483647


def validate_zone_id(zone_id) -> bool:
    """
    Validate a zone identifier or name as passed to the facade.

    Args:
        zone_id: The identifier to validate

    Returns:
        True if it is a non-empty string, False otherwise
    """
    return isinstance(zone_id, str) and bool(zone_id.strip())


def check_zone_id(zone_id) -> str:
    """Return zone_id unchanged, raising InvalidZoneIdError if it is invalid."""
    if not validate_zone_id(zone_id):
        raise InvalidZoneIdError(zone_id)
    return zone_id


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate Fully Qualified Domain Name (FQDN).

    A single trailing dot is accepted, since zone and record names are
    usually written in absolute form (``denominator.io.``).

    Args:
        fqdn: The FQDN to validate

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    name = fqdn[:-1] if fqdn.endswith(".") else fqdn

    if len(name) > 253:
        logger.warning(f"FQDN too long: {fqdn}")
        return False

    labels = name.split(".")

    if len(labels) < 2:
        logger.warning(f"FQDN must have at least 2 labels: {fqdn}")
        return False

    # Consecutive dots
    if any(label == "" for label in labels):
        logger.warning(f"FQDN contains empty labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in FQDN: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """
    Validate a single domain label.

    Labels may contain letters, digits, hyphens and underscores (for service
    names such as ``_sip._tcp``) and must not start or end with a hyphen.
    A single ``*`` is accepted as a wildcard label.
    """
    if label == "*":
        return True

    if len(label) == 0 or len(label) > 63:
        return False

    return bool(re.match(r"^[a-zA-Z0-9_]([a-zA-Z0-9_-]*[a-zA-Z0-9_])?$", label))


def validate_zone_name(zone: str) -> bool:
    """
    Validate DNS zone name.

    Args:
        zone: The zone name to validate

    Returns:
        True if valid, False otherwise
    """
    if not zone or not isinstance(zone, str):
        return False

    if "*" in zone:
        return False

    return validate_fqdn(zone)


def validate_ttl(ttl) -> bool:
    """Validate a TTL in seconds (RFC 2181 limits it to 31 bits)."""
    if isinstance(ttl, bool) or not isinstance(ttl, int):
        return False
    return 0 <= ttl <= MAX_TTL

