################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.entry
# Contains the DirectoryEntry value object returned by directory searches.

# ---------------------------------- IMPORTS --------------------------------- #
from dataclasses import dataclass, field
from typing import Iterable, Mapping
from core.constants.attrs.ldap import LDAP_BINARY_ATTRS
################################################################################

_BINARY_ATTRS = {a.lower() for a in LDAP_BINARY_ATTRS}


def decode_value(attr: str, value):
	"""Decodes a raw attribute value as UTF-8 text unless it is binary."""
	if not isinstance(value, (bytes, bytearray)):
		return value
	if attr.lower() in _BINARY_ATTRS:
		return bytes(value)
	try:
		return bytes(value).decode("utf-8")
	except UnicodeDecodeError:
		return bytes(value)


@dataclass(frozen=True)
class DirectoryEntry:
	"""One directory record, attribute names are case-insensitive."""

	dn: str
	attributes: Mapping[str, tuple] = field(default_factory=dict)

	@classmethod
	def from_attributes(cls, dn: str, attributes: Mapping[str, Iterable]):
		normalized = {}
		for attr, values in attributes.items():
			if isinstance(values, (str, bytes, bytearray)) or not isinstance(
				values, Iterable
			):
				values = [values]
			normalized.setdefault(attr.lower(), [])
			normalized[attr.lower()].extend(decode_value(attr, v) for v in values)
		return cls(
			dn=dn,
			attributes={k: tuple(v) for k, v in normalized.items()},
		)

	def __contains__(self, attr: str) -> bool:
		return attr.lower() in self.attributes

	def get_values(self, attr: str) -> tuple:
		return self.attributes.get(attr.lower(), ())

	def first_value(self, attr: str):
		values = self.get_values(attr)
		return values[0] if values else None
