########################### Standard Pytest Imports ############################
import pytest
################################################################################
from core.ldap.targets import (
	parse_server_address,
	iter_enabled_targets,
	ProtocolVersionPolicy,
	AUTO_PROTOCOL_VERSION,
)


@pytest.mark.parametrize(
	"server, expected",
	(
		("ldap.example.com", ("ldap.example.com", 389)),
		("ldap.example.com:636", ("ldap.example.com", 636)),
		(" 10.0.0.1:10389 ", ("10.0.0.1", 10389)),
		("ldaps://ldap.example.com:636", ("ldaps://ldap.example.com", 636)),
		("ldap://ldap.example.com", ("ldap://ldap.example.com", 389)),
		("ldaps://dc.example.com", ("ldaps://dc.example.com", 636)),
		("LDAPS://dc.example.com", ("LDAPS://dc.example.com", 636)),
		("ldaps://dc.example.com:3269", ("ldaps://dc.example.com", 3269)),
	),
)
def test_parse_server_address(server, expected):
	assert parse_server_address(server) == expected


class TestProtocolVersionPolicy:
	@pytest.mark.parametrize("value", (None, "auto", "AUTO"))
	def test_auto(self, value):
		policy = ProtocolVersionPolicy.from_setting(value)
		assert policy.is_auto
		assert policy == AUTO_PROTOCOL_VERSION
		assert str(policy) == "auto"

	@pytest.mark.parametrize("value, expected", ((2, 2), ("3", 3)))
	def test_fixed(self, value, expected):
		policy = ProtocolVersionPolicy.from_setting(value)
		assert not policy.is_auto
		assert policy.fixed_version == expected
		assert str(policy) == f"v{expected}"

	def test_unsupported_version_raises(self):
		with pytest.raises(ValueError):
			ProtocolVersionPolicy.from_setting(4)


class TestDirectoryTarget:
	def test_str(self, fc_directory_target):
		target = fc_directory_target(port=636, index=2)
		assert str(target) == "#2 (ldap.example.com:636)"

	def test_has_secondary_group_search(self, fc_directory_target):
		assert not fc_directory_target().has_secondary_group_search
		assert not fc_directory_target(
			secondary_group_base_dn="ou=Groups,dc=example,dc=com"
		).has_secondary_group_search
		assert fc_directory_target(
			secondary_group_base_dn="ou=Groups,dc=example,dc=com",
			secondary_group_filter_template="memberUid=%s",
		).has_secondary_group_search

	def test_is_immutable(self, f_directory_target):
		with pytest.raises(AttributeError):
			f_directory_target.host = "other.example.com"


class TestIterEnabledTargets:
	def test_skips_disabled_and_keeps_order(self, fc_directory_target):
		targets = [
			fc_directory_target(host="a", disabled=True, index=0),
			fc_directory_target(host="b", index=1),
			fc_directory_target(host="c", disabled=True, index=2),
			fc_directory_target(host="d", index=3),
		]
		result = list(iter_enabled_targets(targets))
		assert [(t.index, t.host) for t in result] == [(1, "b"), (3, "d")]

	def test_is_restartable(self, fc_directory_target):
		targets = (fc_directory_target(host="a"), fc_directory_target(host="b"))
		assert list(iter_enabled_targets(targets)) == list(
			iter_enabled_targets(targets)
		)

	def test_empty(self):
		assert list(iter_enabled_targets([])) == []
