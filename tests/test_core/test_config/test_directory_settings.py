########################### Standard Pytest Imports ############################
import pytest
################################################################################
import logging
from core.config.directory import DirectorySettings, build_targets, get_setting
from core.ldap import defaults
from core.ldap.targets import AUTO_PROTOCOL_VERSION, ProtocolVersionPolicy


@pytest.fixture
def f_raw_target() -> dict:
	return {
		"server": "ldap.example.com:636",
		"bind_rdn": "uid=%s,ou=People,dc=example,dc=com",
		"search_base_dn": "ou=People,dc=example,dc=com",
		"search_filter": "uid=%s",
	}


def test_get_setting_falls_back_to_defaults(settings):
	del settings.LDAP_CONNECT_TIMEOUT
	assert get_setting("LDAP_CONNECT_TIMEOUT") == defaults.LDAP_CONNECT_TIMEOUT
	settings.LDAP_CONNECT_TIMEOUT = 2
	assert get_setting("LDAP_CONNECT_TIMEOUT") == 2


class TestBuildTargets:
	def test_valid_target(self, f_raw_target):
		(target,) = build_targets([f_raw_target])
		assert target.host == "ldap.example.com"
		assert target.port == 636
		assert target.bind_rdn_template == f_raw_target["bind_rdn"]
		assert target.search_filter_template == "uid=%s"
		assert target.protocol_version_policy == AUTO_PROTOCOL_VERSION
		assert target.group_assignment_attribute is None
		assert target.group_template_id is None
		assert not target.has_secondary_group_search
		assert not target.disabled
		assert dict(target.attribute_map) == {}
		assert target.index == 0

	def test_full_target(self, f_raw_target):
		(target,) = build_targets(
			[
				f_raw_target
				| {
					"protocol_version": 2,
					"group_assignment_attribute": "department",
					"group_template_id": "4",
					"secondary_group_base_dn": "ou=Groups,dc=example,dc=com",
					"secondary_group_filter": "(memberUid=%s)",
					"attribute_map": {"nickname": "displayName"},
					"disabled": True,
				}
			]
		)
		assert target.protocol_version_policy == ProtocolVersionPolicy(fixed_version=2)
		assert target.group_assignment_attribute == "department"
		assert target.group_template_id == 4
		assert target.has_secondary_group_search
		assert target.attribute_map["nickname"] == "displayName"
		assert target.disabled

	def test_invalid_target_is_excluded(self, f_raw_target, caplog):
		caplog.set_level(logging.ERROR)
		targets = build_targets(
			[f_raw_target | {"search_filter": "uid=jdoe"}, f_raw_target]
		)
		assert len(targets) == 1
		# Targets keep their configured position
		assert targets[0].index == 1
		assert "#0 is invalid" in caplog.text

	def test_non_dict_target_is_excluded(self, f_raw_target):
		assert len(build_targets(["ldap.example.com", f_raw_target])) == 1

	def test_only_first_targets_are_used(self, f_raw_target, caplog):
		raw_targets = [
			f_raw_target | {"server": f"ldap{i}.example.com"} for i in range(12)
		]
		targets = build_targets(raw_targets)
		assert len(targets) == defaults.LDAP_MAX_DIRECTORY_TARGETS
		assert targets[-1].host == "ldap9.example.com"
		assert "only the first 10 are used" in caplog.text

	@pytest.mark.parametrize("value", (None, []))
	def test_no_targets(self, value):
		assert build_targets(value) == ()


class TestDirectorySettings:
	def test_from_settings(self, settings, f_raw_target):
		settings.LDAP_AUTH_ENABLED = False
		settings.LDAP_DIRECTORY_TARGETS = [f_raw_target]
		settings.LDAP_FALLBACK_GROUP_ID = "3"
		settings.LDAP_CONNECT_TIMEOUT = 5
		settings.LDAP_RECEIVE_TIMEOUT = 6

		config = DirectorySettings.from_settings()
		assert not config.enabled
		assert len(config.targets) == 1
		assert config.fallback_group_id == 3
		assert config.connect_timeout == 5
		assert config.receive_timeout == 6

	@pytest.mark.parametrize("value", (None, "none", ""))
	def test_fallback_group_none(self, value, settings):
		settings.LDAP_FALLBACK_GROUP_ID = value
		assert DirectorySettings.from_settings().fallback_group_id is None

	def test_snapshot_is_immutable(self, settings, f_raw_target):
		settings.LDAP_DIRECTORY_TARGETS = [f_raw_target]
		config = DirectorySettings.from_settings()
		settings.LDAP_DIRECTORY_TARGETS = []
		assert len(config.targets) == 1
		with pytest.raises(AttributeError):
			config.enabled = False

	def test_from_other_source(self, mocker, f_raw_target):
		source = mocker.Mock(spec=["LDAP_DIRECTORY_TARGETS"])
		source.LDAP_DIRECTORY_TARGETS = [f_raw_target]
		config = DirectorySettings.from_settings(source)
		assert len(config.targets) == 1
		assert config.enabled == defaults.LDAP_AUTH_ENABLED
		assert config.connect_timeout == defaults.LDAP_CONNECT_TIMEOUT
