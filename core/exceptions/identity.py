################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.exceptions.identity
# Contains local identity reconciliation exceptions.

# ---------------------------------- IMPORTS --------------------------------- #
from core.exceptions.base import CoreException
from rest_framework import status
################################################################################


class GroupAssignmentUnavailable(CoreException):
	status_code = status.HTTP_409_CONFLICT
	default_detail = "No group could be assigned to the new user"
	default_code = "user_group_unavailable"


class PersistenceFailed(CoreException):
	status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
	default_detail = "Could not persist local identity data"
	default_code = "identity_persistence_err"
