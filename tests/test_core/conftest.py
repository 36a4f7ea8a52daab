import pytest
from pytest_mock import MockType, MockerFixture
from typing import Protocol, Union
from core.config.directory import DirectorySettings
from core.ldap.client import DirectoryClient
from core.ldap.entry import DirectoryEntry
from core.ldap.targets import DirectoryTarget
from core.models.group import Group, GROUP_PERMISSION_EDITOR

USER_DN = "uid=jdoe,ou=People,dc=example,dc=com"
BASE_DN = "ou=People,dc=example,dc=com"


class DirectoryTargetFactory(Protocol):
	def __call__(self, **kwargs) -> DirectoryTarget: ...


@pytest.fixture
def fc_directory_target() -> DirectoryTargetFactory:
	def maker(**kwargs):
		values = {
			"host": "ldap.example.com",
			"bind_rdn_template": "uid=%s,ou=People,dc=example,dc=com",
			"search_base_dn": BASE_DN,
			"search_filter_template": "uid=%s",
		} | kwargs
		return DirectoryTarget(**values)

	return maker


@pytest.fixture
def f_directory_target(fc_directory_target: DirectoryTargetFactory):
	return fc_directory_target()


class DirectoryEntryFactory(Protocol):
	def __call__(self, dn: str = USER_DN, **attributes) -> DirectoryEntry: ...


@pytest.fixture
def fc_directory_entry() -> DirectoryEntryFactory:
	def maker(dn: str = USER_DN, **attributes):
		return DirectoryEntry.from_attributes(dn, attributes)

	return maker


@pytest.fixture
def f_jdoe_entry(fc_directory_entry: DirectoryEntryFactory):
	return fc_directory_entry(
		mail=[b"jdoe@x.com"],
		givenName=[b"John"],
		sn=[b"Doe"],
		department=[b"Eng"],
	)


class DirectoryClientFactory(Protocol):
	def __call__(
		self,
		entries: list[DirectoryEntry] = None,
		bind: bool = True,
		version: int = 3,
	) -> Union[MockType, DirectoryClient]: ...


@pytest.fixture
def fc_directory_client(mocker: MockerFixture) -> DirectoryClientFactory:
	def maker(entries: list = None, bind: bool = True, version: int = 3):
		m_client = mocker.Mock(name="m_client", spec=DirectoryClient)
		m_client.is_supported.return_value = True
		m_client.connect.side_effect = lambda host, port: mocker.Mock(
			name=f"m_connection_{host}"
		)
		m_client.get_protocol_version.return_value = version
		m_client.bind.return_value = bind
		m_client.search.return_value = entries if entries is not None else []
		return m_client

	return maker


class DirectorySettingsFactory(Protocol):
	def __call__(
		self,
		targets: tuple = (),
		fallback_group_id: int = None,
		enabled: bool = True,
	) -> DirectorySettings: ...


@pytest.fixture
def fc_directory_settings() -> DirectorySettingsFactory:
	def maker(targets=(), fallback_group_id=None, enabled=True):
		return DirectorySettings(
			enabled=enabled,
			targets=tuple(targets),
			fallback_group_id=fallback_group_id,
		)

	return maker


@pytest.fixture
def f_template_group(db) -> Group:
	return Group.objects.create(
		name="Template",
		description="Cloned for directory departments",
		permission_level=GROUP_PERMISSION_EDITOR,
		can_post=False,
		can_upload_files=True,
	)


@pytest.fixture
def f_fallback_group(db) -> Group:
	return Group.objects.create(name="Directory Users")
