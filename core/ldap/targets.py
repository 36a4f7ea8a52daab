################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.targets
# Contains the DirectoryTarget descriptor and the ordered server set iterator.

# ---------------------------------- IMPORTS --------------------------------- #
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping
from types import MappingProxyType
from core.constants.attrs.ldap import (
	LDAP_DEFAULT_PORT,
	LDAP_DEFAULT_SSL_PORT,
	LDAP_PROTOCOL_VERSIONS,
	LDAP_SSL_SCHEME,
)
from core.ldap.defaults import PROTOCOL_VERSION_AUTO
import logging
################################################################################

logger = logging.getLogger(__name__)


def parse_server_address(server: str) -> tuple[str, int]:
	"""Splits ``host[:port]`` into host and port.

	URI schemes (``ldaps://``) stay on the host. Without a port, ``ldaps://``
	hosts get 636 and everything else 389.
	"""
	server = (server or "").strip()
	host, sep, port = server.rpartition(":")
	if sep and port.isdigit():
		return host, int(port)
	if server.lower().startswith(LDAP_SSL_SCHEME):
		return server, LDAP_DEFAULT_SSL_PORT
	return server, LDAP_DEFAULT_PORT


@dataclass(frozen=True)
class ProtocolVersionPolicy:
	"""Auto when fixed_version is None, otherwise a single version."""

	fixed_version: int | None = None

	@classmethod
	def from_setting(cls, value) -> "ProtocolVersionPolicy":
		if value is None or str(value).lower() == PROTOCOL_VERSION_AUTO:
			return cls()
		version = int(value)
		if version not in LDAP_PROTOCOL_VERSIONS:
			raise ValueError(f"Unsupported LDAP protocol version: {value}")
		return cls(fixed_version=version)

	@property
	def is_auto(self) -> bool:
		return self.fixed_version is None

	def __str__(self):
		return PROTOCOL_VERSION_AUTO if self.is_auto else f"v{self.fixed_version}"


AUTO_PROTOCOL_VERSION = ProtocolVersionPolicy()


@dataclass(frozen=True)
class DirectoryTarget:
	host: str
	bind_rdn_template: str
	search_base_dn: str
	search_filter_template: str
	port: int = LDAP_DEFAULT_PORT
	disabled: bool = False
	protocol_version_policy: ProtocolVersionPolicy = AUTO_PROTOCOL_VERSION
	group_assignment_attribute: str | None = None
	group_template_id: int | None = None
	secondary_group_base_dn: str | None = None
	secondary_group_filter_template: str | None = None
	attribute_map: Mapping[str, str] = field(
		default_factory=lambda: MappingProxyType({})
	)
	index: int = 0

	@property
	def address(self) -> str:
		return f"{self.host}:{self.port}"

	@property
	def has_secondary_group_search(self) -> bool:
		return bool(
			self.secondary_group_base_dn and self.secondary_group_filter_template
		)

	def __str__(self):
		return f"#{self.index} ({self.address})"


def iter_enabled_targets(
	targets: Iterable[DirectoryTarget],
) -> Iterator[DirectoryTarget]:
	"""Yields targets in configured order, skipping disabled ones."""
	for target in targets:
		if target.disabled:
			logger.debug("Skipping disabled LDAP server %s", target)
			continue
		yield target
