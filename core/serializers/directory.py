################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.serializers.directory
# Contains the serializer that validates one configured directory server set

# ---------------------------------- IMPORTS --------------------------------- #
from rest_framework import serializers
from rest_framework.serializers import ValidationError
from ldap3.core.exceptions import LDAPException
from ldap3.utils.dn import parse_dn
from core.identity.store import normalize_id
from core.ldap.defaults import (
	LDAP_FIELD_MAP,
	PROTOCOL_VERSION_AUTO,
	PROTOCOL_VERSION_CHOICES,
)
from core.ldap.filter import has_login_placeholder
################################################################################


def dn_validator_se(v: str):
	try:
		parse_dn(v)
	except LDAPException:
		raise ValidationError("Could not parse Distinguished Name.")
	return v


def login_template_validator(v: str):
	if not has_login_placeholder(v):
		raise ValidationError("Value must contain the %s login placeholder.")
	return v


class DistinguishedNameField(serializers.CharField):
	def __init__(self, **kwargs):
		if "validators" not in kwargs:
			kwargs["validators"] = [dn_validator_se]
		else:
			kwargs["validators"] = [dn_validator_se] + kwargs["validators"]
		super().__init__(**kwargs)


class OptionalIdField(serializers.Field):
	"""Row id where "none", blank and null all mean no row."""

	def to_internal_value(self, data):
		if isinstance(data, bool):
			raise ValidationError("A valid integer or none is required.")
		if isinstance(data, str) and (
			not data.strip() or data.strip().lower() == "none"
		):
			return None
		value = normalize_id(data)
		if value is None:
			raise ValidationError("A valid integer or none is required.")
		return value

	def to_representation(self, value):
		return value


class DirectoryTargetSerializer(serializers.Serializer):
	server = serializers.CharField()
	bind_rdn = serializers.CharField(validators=[login_template_validator])
	search_base_dn = DistinguishedNameField(allow_blank=True, default="")
	search_filter = serializers.CharField(validators=[login_template_validator])
	protocol_version = serializers.ChoiceField(
		choices=PROTOCOL_VERSION_CHOICES,
		allow_null=True,
		default=PROTOCOL_VERSION_AUTO,
	)
	group_assignment_attribute = serializers.CharField(
		allow_blank=True, allow_null=True, default=None
	)
	group_template_id = OptionalIdField(allow_null=True, default=None)
	secondary_group_base_dn = DistinguishedNameField(
		allow_blank=True, allow_null=True, default=None
	)
	secondary_group_filter = serializers.CharField(
		allow_blank=True, allow_null=True, default=None
	)
	attribute_map = serializers.DictField(
		child=serializers.CharField(), default=dict
	)
	disabled = serializers.BooleanField(default=False)

	def validate_server(self, v: str):
		if not v.strip():
			raise ValidationError("Server address cannot be empty.")
		return v.strip()

	def validate_attribute_map(self, v: dict):
		unknown = [k for k in v if k not in LDAP_FIELD_MAP]
		if unknown:
			raise ValidationError(
				"Unknown local fields in attribute map: %s" % ", ".join(unknown)
			)
		return v

	def validate(self, attrs: dict):
		# Blank optional values are stored as absent
		for key in (
			"group_assignment_attribute",
			"secondary_group_base_dn",
			"secondary_group_filter",
		):
			if not attrs.get(key):
				attrs[key] = None
		return super().validate(attrs)
