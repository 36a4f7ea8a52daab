################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.auth.ldap

# ---------------------------------- IMPORTS --------------------------------- #
from django.contrib.auth.backends import ModelBackend
from django.utils.translation import get_language_from_request
from core.config.directory import DirectorySettings
from core.identity.store import IdentityStore
from core.ldap.client import LDAPDirectoryClient
from core.ldap.reconciler import DirectoryAuthenticator

################################################################################
"""
Django authentication backend.
"""


class LDAPBackend(ModelBackend):
	"""
	An authentication backend that delegates to the configured
	LDAP server sets.

	User models authenticated with LDAP are created on
	the fly, and syncronised with the directory attributes.
	"""

	supports_inactive_user = False
	# Binding needs the clear text password
	needs_raw_password = True

	def get_authenticator(self, config: DirectorySettings) -> DirectoryAuthenticator:
		client = LDAPDirectoryClient(
			connect_timeout=config.connect_timeout,
			receive_timeout=config.receive_timeout,
		)
		return DirectoryAuthenticator(client, IdentityStore(), config)

	def authenticate(
		self, request, username=None, password=None, password_digest=None, **kwargs
	):
		if not username or not password:
			return None

		locale = get_language_from_request(request) if request is not None else None
		authenticator = self.get_authenticator(DirectorySettings.from_settings())
		result = authenticator.authenticate(
			username,
			password,
			secret_digest=password_digest,
			locale=locale,
		)
		if not result.accepted or not self.user_can_authenticate(result.user):
			return None
		return result.user
