import pytest
from rest_framework import status
from core.exceptions.base import CoreException
from core.exceptions import ldap as exc_ldap
from core.exceptions import identity as exc_identity


def test_init_without_data():
	"""
	Test that the `detail` attribute is set to default values when `data` is None.
	"""
	exception = CoreException()
	assert exception.detail == {
		"code": exception.default_code,
		"detail": exception.default_detail,
	}


def test_init_with_data():
	data = {"code": "custom_code", "detail": "custom_detail"}
	exception = CoreException(data=data)
	assert exception.detail == data


def test_set_detail_with_partial_dict():
	"""
	Test that `set_detail` adds missing keys (`code` and `detail`) when `data` is a partial dictionary.
	"""
	exception = CoreException()
	exception.set_detail({"custom_key": "custom_value"})
	assert exception.detail == {
		"custom_key": "custom_value",
		"code": exception.default_code,
		"detail": exception.default_detail,
	}


def test_set_detail_with_non_dict():
	exception = CoreException()
	exception.set_detail("non_dict_data")
	assert exception.detail == "non_dict_data"


def test_set_detail_with_full_dict():
	exception = CoreException()
	data = {
		"code": "existing_code",
		"detail": "existing_detail",
		"custom_key": "custom_value",
	}
	exception.set_detail(data)
	assert exception.detail == data


@pytest.mark.parametrize(
	"data, expected",
	(
		(None, CoreException.default_detail),
		({"message": "Some message"}, "Some message"),
		({"detail": "Some detail"}, "Some detail"),
		("plain", "plain"),
	),
)
def test_dunder_str(data, expected):
	assert str(CoreException(data=data)) == str(expected)


@pytest.mark.parametrize(
	"exc_class, code, status_code",
	(
		(exc_ldap.DirectoryUnsupported, "ldap_unsupported", status.HTTP_418_IM_A_TEAPOT),
		(exc_ldap.NoTargetsConfigured, "ldap_no_targets", status.HTTP_503_SERVICE_UNAVAILABLE),
		(exc_ldap.ConnectFailed, "ldap_connect_err", status.HTTP_503_SERVICE_UNAVAILABLE),
		(exc_ldap.BindFailed, "ldap_bind_err", status.HTTP_401_UNAUTHORIZED),
		(exc_ldap.SearchFailed, "ldap_search_err", status.HTTP_502_BAD_GATEWAY),
		(exc_ldap.AmbiguousOrMissingEntry, "ldap_entry_count", status.HTTP_404_NOT_FOUND),
		(
			exc_identity.GroupAssignmentUnavailable,
			"user_group_unavailable",
			status.HTTP_409_CONFLICT,
		),
		(
			exc_identity.PersistenceFailed,
			"identity_persistence_err",
			status.HTTP_500_INTERNAL_SERVER_ERROR,
		),
	),
)
def test_exception_codes(exc_class, code, status_code):
	exception = exc_class()
	assert isinstance(exception, CoreException)
	assert exception.status_code == status_code
	assert exception.detail["code"] == code
