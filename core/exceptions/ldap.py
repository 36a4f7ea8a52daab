################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.exceptions.ldap
# Contains directory authentication exceptions.

# ---------------------------------- IMPORTS --------------------------------- #
from core.exceptions.base import CoreException
from rest_framework import status
################################################################################

# Attempt-wide failures


class DirectoryUnsupported(CoreException):
	status_code = status.HTTP_418_IM_A_TEAPOT
	default_detail = "Directory authentication is not available"
	default_code = "ldap_unsupported"


class NoTargetsConfigured(CoreException):
	status_code = status.HTTP_503_SERVICE_UNAVAILABLE
	default_detail = "No directory servers are configured"
	default_code = "ldap_no_targets"


# Per-target failures, the next target is tried after any of these


class ConnectFailed(CoreException):
	status_code = status.HTTP_503_SERVICE_UNAVAILABLE
	default_detail = "Could not connect to LDAP Server"
	default_code = "ldap_connect_err"


class BindFailed(CoreException):
	status_code = status.HTTP_401_UNAUTHORIZED
	default_detail = "Could not bind to LDAP Server"
	default_code = "ldap_bind_err"


class SearchFailed(CoreException):
	status_code = status.HTTP_502_BAD_GATEWAY
	default_detail = "LDAP Search failed"
	default_code = "ldap_search_err"


class AmbiguousOrMissingEntry(CoreException):
	status_code = status.HTTP_404_NOT_FOUND
	default_detail = "LDAP Search did not match exactly one entry"
	default_code = "ldap_entry_count"


class ConnectionNotOpen(CoreException):
	status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
	default_detail = "No LDAP Connection was open prior to this operation"
	default_code = "ldap_connection_not_open"
