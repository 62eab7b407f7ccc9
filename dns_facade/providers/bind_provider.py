"""
BIND DNS provider implementation.

This module provides BIND DNS server integration using the dnspython library.
Record sets are read by zone transfer and written by RFC 2136 dynamic update.
"""

import logging
import re
from typing import Dict, Iterator, List, Optional

import dns.message
import dns.name
import dns.query
import dns.rcode
import dns.rdatatype
import dns.tsigkeyring
import dns.update
import dns.zone

from .base_provider import DNSProvider
from ..core.model import ResourceRecordSet, Zone
from ..core.provider import Provider
from ..core.record_sets import (
    AllProfileResourceRecordSetApi,
    AllProfileResourceRecordSetApiFactory,
    ResourceRecordSetApi,
    ResourceRecordSetApiFactory,
    UnsupportedGeoFactory,
    UnsupportedWeightedFactory,
)
from ..core.zones import ZoneApi
from ..exceptions import ProviderError
from ..utils.validators import validate_fqdn, validate_zone_name

logger = logging.getLogger(__name__)

BIND = Provider(name="bind", url="https://www.isc.org/bind/")


class BINDConnection:
    """Nameserver address, TSIG key and the queries sent to it."""

    def __init__(self, config: Dict):
        self.nameserver = config.get("nameserver", "127.0.0.1")
        self.port = config.get("port", 53)
        self.timeout = config.get("timeout", 30)
        self.key_file = config.get("key_file", "")
        self.key_name = config.get("key_name", "")

        self.keyring = None
        if self.key_file and self.key_name:
            try:
                with open(self.key_file, "r") as f:
                    key_content = f.read().strip()
            except OSError as e:
                logger.warning(f"Failed to load TSIG key: {e}")
                logger.debug("TSIG authentication will not be available")
                return

            secret = _parse_bind_key_file(key_content, self.key_name)
            if secret:
                self.keyring = dns.tsigkeyring.from_text({self.key_name: secret})
                logger.info(f"TSIG key loaded from {self.key_file}")
            else:
                logger.warning(
                    f"Could not extract secret for key '{self.key_name}' from {self.key_file}"
                )

    def transfer(self, zone: str) -> dns.zone.Zone:
        """Fetch the whole zone by AXFR."""
        try:
            return dns.zone.from_xfr(
                dns.query.xfr(
                    self.nameserver,
                    zone,
                    port=self.port,
                    keyring=self.keyring,
                    lifetime=self.timeout,
                )
            )
        except Exception as e:
            logger.error(f"Zone transfer of {zone} from {self.nameserver} failed: {e}")
            raise ProviderError(f"Zone transfer of {zone} failed: {e}") from e

    def send(self, update: dns.update.Update, operation: str) -> None:
        """Send a dynamic update, raising ProviderError unless it returns NOERROR."""
        try:
            response = dns.query.tcp(
                update, self.nameserver, port=self.port, timeout=self.timeout
            )
        except Exception as e:
            logger.error(f"DNS {operation} query failed: {e}")
            raise ProviderError(f"Failed to {operation} the record set: {e}") from e
        if response.rcode() != dns.rcode.NOERROR:
            _handle_dns_error(response, operation)


def _parse_bind_key_file(key_content: str, key_name: str) -> Optional[str]:
    """Parse BIND key file format to extract the secret for a specific key."""
    key_pattern = rf'key\s+"{re.escape(key_name)}"\s*{{(.*?)}}'
    match = re.search(key_pattern, key_content, re.DOTALL)
    if match:
        secret_match = re.search(r'secret\s+"([^"]+)"', match.group(1))
        if secret_match:
            return secret_match.group(1)
    return None


def _handle_dns_error(response: dns.message.Message, operation: str) -> None:
    """Handle DNS error responses by logging and raising ProviderError."""
    error_message = (
        f"DNS update failed with response code: {dns.rcode.to_text(response.rcode())}"
    )
    if response.answer:
        error_message += f", server response: {response.answer}"
    logger.error(error_message)
    raise ProviderError(f"Failed to {operation} the record set: {error_message}")


class BINDZoneApi(ZoneApi):
    """BIND has no zone listing protocol; zones come from configuration."""

    def __init__(self, zone_names: List[str]):
        self._zone_names = zone_names

    def __iter__(self) -> Iterator[Zone]:
        return (Zone(name=name) for name in self._zone_names)


class BINDResourceRecordSetApi(ResourceRecordSetApi):
    def __init__(self, connection: BINDConnection, zone_id: str):
        super().__init__(zone_id)
        self._connection = connection

    def __iter__(self) -> Iterator[ResourceRecordSet]:
        zone_obj = self._connection.transfer(self.zone_id)
        rrsets = []
        for name, node in zone_obj.nodes.items():
            fqdn = name.derelativize(zone_obj.origin).to_text()
            for rdataset in node.rdatasets:
                rrsets.append(
                    ResourceRecordSet(
                        name=fqdn,
                        type=dns.rdatatype.to_text(rdataset.rdtype),
                        ttl=rdataset.ttl,
                        records=[
                            rdata.to_text(origin=zone_obj.origin, relativize=False)
                            for rdata in rdataset
                        ],
                    )
                )
        logger.info(f"Retrieved {len(rrsets)} record sets from BIND zone {self.zone_id}")
        return iter(rrsets)

    def put(self, rrset: ResourceRecordSet) -> None:
        if not rrset.is_basic:
            raise ValueError(f"BIND does not support qualified record set {rrset.name}")
        if not validate_fqdn(rrset.name):
            raise ValueError(f"Invalid record set name '{rrset.name}'")
        if not rrset.records:
            raise ValueError(f"Record set {rrset.name} {rrset.type} has no records")
        update = dns.update.Update(self.zone_id, keyring=self._connection.keyring)
        update.replace(
            dns.name.from_text(rrset.name),
            rrset.ttl if rrset.ttl is not None else 300,
            dns.rdatatype.from_text(rrset.type),
            *rrset.records,
        )
        self._connection.send(update, "put")
        logger.debug(f"Put {rrset.name} {rrset.type} -> {rrset.records}")

    def delete_by_name_and_type(self, name: str, type: str) -> None:
        update = dns.update.Update(self.zone_id, keyring=self._connection.keyring)
        update.delete(dns.name.from_text(name), dns.rdatatype.from_text(type))
        self._connection.send(update, "delete")
        logger.debug(f"Deleted {name} {type}")


class BINDAllProfileResourceRecordSetApi(AllProfileResourceRecordSetApi):
    """BIND has no profiles, so every record set is a basic one."""

    def __init__(self, basic: BINDResourceRecordSetApi):
        super().__init__(basic.zone_id)
        self._basic = basic

    def __iter__(self) -> Iterator[ResourceRecordSet]:
        return iter(self._basic)

    def put(self, rrset: ResourceRecordSet) -> None:
        self._basic.put(rrset)

    def delete_by_name_type_and_qualifier(self, name: str, type: str, qualifier: str) -> None:
        if qualifier is None:
            self._basic.delete_by_name_and_type(name, type)


class BINDResourceRecordSetApiFactory(ResourceRecordSetApiFactory):
    def __init__(self, connection: BINDConnection):
        self._connection = connection

    def _create(self, zone_id: str) -> BINDResourceRecordSetApi:
        return BINDResourceRecordSetApi(self._connection, zone_id)


class BINDAllProfileResourceRecordSetApiFactory(AllProfileResourceRecordSetApiFactory):
    def __init__(self, connection: BINDConnection):
        self._connection = connection

    def _create(self, zone_id: str) -> BINDAllProfileResourceRecordSetApi:
        return BINDAllProfileResourceRecordSetApi(
            BINDResourceRecordSetApi(self._connection, zone_id)
        )


class BINDProvider(DNSProvider):
    """BIND DNS provider implementation using dnspython library."""

    descriptor = BIND

    def __init__(self, config: Dict):
        """Initialize BIND provider."""
        self.config = config
        self.connection = BINDConnection(config)
        self.zone_names = list(config.get("zones") or [])
        for zone in self.zone_names:
            if not validate_zone_name(zone):
                raise ValueError(f"Invalid zone name '{zone}' in BIND configuration")
        logger.info(
            f"BIND provider initialized for nameserver "
            f"{self.connection.nameserver}:{self.connection.port}"
        )

    @property
    def provider(self) -> Provider:
        return self.descriptor

    def zones(self) -> BINDZoneApi:
        return BINDZoneApi(self.zone_names)

    def basic_record_set_api_factory(self) -> BINDResourceRecordSetApiFactory:
        return BINDResourceRecordSetApiFactory(self.connection)

    def all_profile_record_set_api_factory(self) -> BINDAllProfileResourceRecordSetApiFactory:
        return BINDAllProfileResourceRecordSetApiFactory(self.connection)

    def geo_record_set_api_factory(self) -> UnsupportedGeoFactory:
        return UnsupportedGeoFactory(BIND)

    def weighted_record_set_api_factory(self) -> UnsupportedWeightedFactory:
        return UnsupportedWeightedFactory(BIND)
