################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.config.directory
# Contains the immutable directory settings snapshot built for each
# authentication attempt.

# ---------------------------------- IMPORTS --------------------------------- #
from dataclasses import dataclass
from types import MappingProxyType
from django.conf import settings
from core.identity.store import normalize_id
from core.ldap import defaults
from core.ldap.targets import (
	DirectoryTarget,
	ProtocolVersionPolicy,
	parse_server_address,
)
from core.serializers.directory import DirectoryTargetSerializer
import logging
################################################################################

logger = logging.getLogger(__name__)

DIRECTORY_SETTING_KEYS = (
	"LDAP_AUTH_ENABLED",
	"LDAP_DIRECTORY_TARGETS",
	"LDAP_FALLBACK_GROUP_ID",
	"LDAP_CONNECT_TIMEOUT",
	"LDAP_RECEIVE_TIMEOUT",
)


def get_setting(name: str, source=None):
	"""Returns a directory setting, falling back to core.ldap.defaults."""
	if source is None:
		source = settings
	return getattr(source, name, getattr(defaults, name))


def build_target(validated_data: dict, index: int) -> DirectoryTarget:
	host, port = parse_server_address(validated_data["server"])
	return DirectoryTarget(
		host=host,
		port=port,
		bind_rdn_template=validated_data["bind_rdn"],
		search_base_dn=validated_data["search_base_dn"],
		search_filter_template=validated_data["search_filter"],
		disabled=validated_data["disabled"],
		protocol_version_policy=ProtocolVersionPolicy.from_setting(
			validated_data["protocol_version"]
		),
		group_assignment_attribute=validated_data["group_assignment_attribute"],
		group_template_id=validated_data["group_template_id"],
		secondary_group_base_dn=validated_data["secondary_group_base_dn"],
		secondary_group_filter_template=validated_data["secondary_group_filter"],
		attribute_map=MappingProxyType(dict(validated_data["attribute_map"])),
		index=index,
	)


def build_targets(raw_targets) -> tuple[DirectoryTarget, ...]:
	"""Validates raw target dicts, invalid ones are logged and left out."""
	raw_targets = list(raw_targets or [])
	if len(raw_targets) > defaults.LDAP_MAX_DIRECTORY_TARGETS:
		logger.warning(
			"%d directory server sets configured, only the first %d are used.",
			len(raw_targets),
			defaults.LDAP_MAX_DIRECTORY_TARGETS,
		)
		raw_targets = raw_targets[: defaults.LDAP_MAX_DIRECTORY_TARGETS]

	targets = []
	for index, raw in enumerate(raw_targets):
		serializer = DirectoryTargetSerializer(data=raw)
		if not serializer.is_valid():
			logger.error(
				"Directory server set #%d is invalid and will be ignored: %s",
				index,
				serializer.errors,
			)
			continue
		targets.append(build_target(serializer.validated_data, index))
	return tuple(targets)


@dataclass(frozen=True)
class DirectorySettings:
	enabled: bool = defaults.LDAP_AUTH_ENABLED
	targets: tuple[DirectoryTarget, ...] = ()
	fallback_group_id: int | None = defaults.LDAP_FALLBACK_GROUP_ID
	connect_timeout: int = defaults.LDAP_CONNECT_TIMEOUT
	receive_timeout: int = defaults.LDAP_RECEIVE_TIMEOUT

	@classmethod
	def from_settings(cls, source=None) -> "DirectorySettings":
		"""Snapshot of the Django settings (or any object carrying the same
		attributes) as they are right now."""
		values = {k: get_setting(k, source) for k in DIRECTORY_SETTING_KEYS}
		return cls(
			enabled=bool(values["LDAP_AUTH_ENABLED"]),
			targets=build_targets(values["LDAP_DIRECTORY_TARGETS"]),
			fallback_group_id=normalize_id(values["LDAP_FALLBACK_GROUP_ID"]),
			connect_timeout=values["LDAP_CONNECT_TIMEOUT"],
			receive_timeout=values["LDAP_RECEIVE_TIMEOUT"],
		)
