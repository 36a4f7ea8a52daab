################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.resolver
# Contains the mapping from a directory entry to normalized user attributes.
# Nothing in here touches the network or the database.

# ---------------------------------- IMPORTS --------------------------------- #
from dataclasses import dataclass, field
from typing import Mapping
from types import MappingProxyType
from core.constants.attrs.ldap import (
	LOCAL_ATTR_EMAIL,
	LOCAL_ATTR_NICKNAME,
	LOCAL_ATTR_FIRST_NAME,
	LOCAL_ATTR_LAST_NAME,
	LOCAL_ATTR_PHOTO,
)
from core.ldap import defaults
from core.ldap.entry import DirectoryEntry
################################################################################


@dataclass(frozen=True)
class UserFieldMapping:
	code: str
	name: str
	group_name: str
	type: str
	value: str


@dataclass(frozen=True)
class NormalizedAttributes:
	email: str | None = None
	nickname: str | None = None
	first_name: str | None = None
	last_name: str | None = None
	custom_fields: tuple[UserFieldMapping, ...] = ()
	organizations: tuple[str, ...] = ()
	photo: bytes | None = None
	values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

	def value_of(self, attr: str) -> str | None:
		"""Trimmed first value of any textual directory attribute."""
		if not attr:
			return None
		return self.values.get(attr.lower())

	def profile_fields(self) -> dict:
		"""Profile fields that were present in the entry."""
		r = {}
		for local_attr in (
			LOCAL_ATTR_EMAIL,
			LOCAL_ATTR_NICKNAME,
			LOCAL_ATTR_FIRST_NAME,
			LOCAL_ATTR_LAST_NAME,
		):
			v = getattr(self, local_attr)
			if v is not None:
				r[local_attr] = v
		return r


def clean_text(value) -> str | None:
	"""Returns the stripped text, None when absent or blank."""
	if not isinstance(value, str):
		return None
	value = value.strip()
	return value or None


def build_field_map(overrides: Mapping[str, str] = None) -> dict:
	field_map = dict(defaults.LDAP_FIELD_MAP)
	if overrides:
		field_map.update(overrides)
	return field_map


def resolve_identity(
	entry: DirectoryEntry,
	attribute_map: Mapping[str, str] = None,
	user_field_map: Mapping[str, tuple] = None,
	organization_attrs: tuple = None,
) -> NormalizedAttributes:
	if user_field_map is None:
		user_field_map = defaults.LDAP_USER_FIELD_MAP
	if organization_attrs is None:
		organization_attrs = defaults.LDAP_ORGANIZATION_ATTRS
	field_map = build_field_map(attribute_map)

	values = {}
	for attr in entry.attributes:
		v = clean_text(entry.first_value(attr))
		if v is not None:
			values[attr] = v

	def _text(ldap_attr):
		return values.get(ldap_attr.lower()) if ldap_attr else None

	custom_fields = []
	for ldap_attr, (code, name, group_name, field_type) in user_field_map.items():
		v = _text(ldap_attr)
		if v is None:
			continue
		custom_fields.append(
			UserFieldMapping(
				code=code,
				name=name,
				group_name=group_name,
				type=field_type,
				value=v,
			)
		)

	organizations = []
	for ldap_attr in organization_attrs:
		v = _text(ldap_attr)
		if v is not None and v not in organizations:
			organizations.append(v)

	photo = entry.first_value(field_map.get(LOCAL_ATTR_PHOTO) or "")
	if not isinstance(photo, (bytes, bytearray)) or not photo:
		photo = None

	return NormalizedAttributes(
		email=_text(field_map.get(LOCAL_ATTR_EMAIL)),
		nickname=_text(field_map.get(LOCAL_ATTR_NICKNAME)),
		first_name=_text(field_map.get(LOCAL_ATTR_FIRST_NAME)),
		last_name=_text(field_map.get(LOCAL_ATTR_LAST_NAME)),
		custom_fields=tuple(custom_fields),
		organizations=tuple(organizations),
		photo=bytes(photo) if photo else None,
		values=MappingProxyType(values),
	)
