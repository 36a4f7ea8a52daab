import pytest


@pytest.fixture(autouse=True)
def set_debug_off(settings):
	settings.DEBUG = False


@pytest.fixture(autouse=True)
def g_ldap_settings_default(settings):
	# Every test starts without directory servers configured
	settings.LDAP_AUTH_ENABLED = True
	settings.LDAP_DIRECTORY_TARGETS = []
	settings.LDAP_FALLBACK_GROUP_ID = None
