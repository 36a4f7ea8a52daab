################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.connector
# Contains the per-target scoped connection used during one authentication.

# ---------------------------------- IMPORTS --------------------------------- #
from core.constants.attrs.ldap import LDAP_ATTR_COMMON_NAME
from core.exceptions import ldap as exc_ldap
from core.ldap.defaults import LDAP_SECONDARY_GROUP_ATTRS
from core.ldap.client import DirectoryClient
from core.ldap.entry import DirectoryEntry
from core.ldap.filter import substitute_filter
from core.ldap.negotiator import negotiate
from core.ldap.targets import DirectoryTarget
from uuid import uuid4
import logging
################################################################################

logger = logging.getLogger(__name__)


class TargetConnection(object):
	"""Connection to a single DirectoryTarget.

	Must be used as a context manager, leaving it restores the connection's
	initial protocol version and closes it, whatever happened inside.
	"""

	log_debug_prefix = "[DEBUG - TargetConnection] | "
	_entered = False

	def __init__(self, client: DirectoryClient, target: DirectoryTarget):
		self.client = client
		self.target = target
		self.connection = None
		self.initial_version = None
		self.bound_version = None
		self.uuid = uuid4()

	def __enter__(self) -> "TargetConnection":
		self._entered = True
		self.connection = self.client.connect(self.target.host, self.target.port)
		self.initial_version = self.client.get_protocol_version(self.connection)
		logger.info("Connection %s to %s opened.", self.uuid, self.target)
		return self

	def __exit__(self, exc_type, exc_value, traceback) -> None:
		self.__validate_entered__()
		if self.connection is None:
			return
		try:
			if self.initial_version is not None:
				self.client.set_protocol_version(
					self.connection, self.initial_version
				)
		finally:
			self.client.close(self.connection)
			self.connection = None
			logger.info("Connection %s closed.", self.uuid)

	def __validate_entered__(self) -> None:
		"""Ensure the TargetConnection is used within a context manager."""
		if not self._entered:
			raise Exception(
				"TargetConnection can only be used as a context manager."
			)

	def __validate_open__(self) -> None:
		self.__validate_entered__()
		if self.connection is None:
			raise exc_ldap.ConnectionNotOpen

	def bind(self, login: str, secret: str) -> int:
		self.__validate_open__()
		self.bound_version = negotiate(
			client=self.client,
			connection=self.connection,
			target=self.target,
			login=login,
			secret=secret,
			initial=self.initial_version,
		)
		return self.bound_version

	def search(
		self,
		base_dn: str,
		filter_template: str,
		login: str,
		attributes: list[str] = None,
		size_limit: int = 0,
	) -> list[DirectoryEntry]:
		self.__validate_open__()
		search_filter = substitute_filter(filter_template, login)
		logger.debug(
			"%sSearching %s with filter %s", self.log_debug_prefix, base_dn, search_filter
		)
		return self.client.search(
			self.connection,
			base_dn,
			search_filter,
			attributes=attributes,
			size_limit=size_limit,
		)

	def get_user_entry(self, login: str) -> DirectoryEntry:
		"""Returns the only entry matching the login on this target."""
		entries = self.search(
			self.target.search_base_dn,
			self.target.search_filter_template,
			login,
			# Two results are enough to know the match is ambiguous
			size_limit=2,
		)
		if len(entries) != 1:
			raise exc_ldap.AmbiguousOrMissingEntry(
				data={
					"message": "%d entries found for login on %s"
					% (len(entries), self.target)
				}
			)
		return entries[0]

	def get_secondary_group_names(self, login: str) -> list[str]:
		entries = self.search(
			self.target.secondary_group_base_dn,
			self.target.secondary_group_filter_template,
			login,
			attributes=LDAP_SECONDARY_GROUP_ATTRS,
		)
		names = []
		for entry in entries:
			for value in entry.get_values(LDAP_ATTR_COMMON_NAME):
				if isinstance(value, str) and value.strip() and value.strip() not in names:
					names.append(value.strip())
		return names
