################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.client
# Contains:
# - The DirectoryClient interface the reconciliation engine talks to
# - Its ldap3 implementation

# ---------------------------------- IMPORTS --------------------------------- #
# LDAP
import ldap3
from ldap3.core.exceptions import LDAPException
from ldap3.core.results import RESULT_SUCCESS, RESULT_SIZE_LIMIT_EXCEEDED
from core.exceptions import ldap as exc_ldap
from core.ldap.entry import DirectoryEntry
from core.ldap import defaults

# Libs
from abc import ABC, abstractmethod
import logging
################################################################################

logger = logging.getLogger(__name__)

SEARCH_RESULT_ENTRY = "searchResEntry"
SEARCH_OK_RESULTS = (RESULT_SUCCESS, RESULT_SIZE_LIMIT_EXCEEDED)


class DirectoryClient(ABC):
	"""Network access to directory servers.

	Connections returned by connect() are opened but not bound.
	"""

	def is_supported(self) -> bool:
		return True

	@abstractmethod
	def connect(self, host: str, port: int): ...

	@abstractmethod
	def get_protocol_version(self, connection) -> int | None: ...

	@abstractmethod
	def set_protocol_version(self, connection, version: int) -> None: ...

	@abstractmethod
	def bind(self, connection, dn: str, secret: str) -> bool: ...

	@abstractmethod
	def search(
		self,
		connection,
		base_dn: str,
		search_filter: str,
		attributes: list[str] = None,
		size_limit: int = 0,
	) -> list[DirectoryEntry]: ...

	@abstractmethod
	def close(self, connection) -> None: ...


class LDAPDirectoryClient(DirectoryClient):
	log_debug_prefix = "[DEBUG - LDAPDirectoryClient] | "

	def __init__(
		self,
		connect_timeout: int = defaults.LDAP_CONNECT_TIMEOUT,
		receive_timeout: int = defaults.LDAP_RECEIVE_TIMEOUT,
	):
		self.connect_timeout = connect_timeout
		self.receive_timeout = receive_timeout

	def connect(self, host: str, port: int) -> ldap3.Connection:
		logger.debug("%sConnecting to %s:%s", self.log_debug_prefix, host, port)
		try:
			server = ldap3.Server(
				host,
				port=port,
				get_info=ldap3.NONE,
				connect_timeout=self.connect_timeout,
			)
			connection = ldap3.Connection(
				server,
				# User and password are set per bind attempt
				authentication=ldap3.SIMPLE,
				auto_bind=ldap3.AUTO_BIND_NONE,
				raise_exceptions=False,
				read_only=True,
				receive_timeout=self.receive_timeout,
			)
			connection.open()
		except LDAPException as ex:
			raise exc_ldap.ConnectFailed(
				data={"message": f"Could not connect to {host}:{port}: {ex}"}
			)
		return connection

	def get_protocol_version(self, connection: ldap3.Connection) -> int | None:
		return getattr(connection, "version", None)

	def set_protocol_version(self, connection: ldap3.Connection, version: int) -> None:
		connection.version = version

	def bind(self, connection: ldap3.Connection, dn: str, secret: str) -> bool:
		connection.user = dn
		connection.password = secret
		try:
			bound = connection.bind()
		except LDAPException as ex:
			logger.debug("%sBind raised: %s", self.log_debug_prefix, ex)
			return False
		if not bound:
			logger.debug(
				"%sBind refused: %s",
				self.log_debug_prefix,
				(connection.result or {}).get("description"),
			)
		return bool(bound)

	def search(
		self,
		connection: ldap3.Connection,
		base_dn: str,
		search_filter: str,
		attributes: list[str] = None,
		size_limit: int = 0,
	) -> list[DirectoryEntry]:
		if not base_dn:
			raise exc_ldap.SearchFailed(data={"message": "Search base DN is empty."})
		try:
			connection.search(
				search_base=base_dn,
				search_filter=search_filter,
				search_scope=ldap3.SUBTREE,
				attributes=attributes or ldap3.ALL_ATTRIBUTES,
				size_limit=size_limit,
			)
		except LDAPException as ex:
			raise exc_ldap.SearchFailed(data={"message": f"Search raised: {ex}"})

		result = connection.result or {}
		if result.get("result") not in SEARCH_OK_RESULTS:
			raise exc_ldap.SearchFailed(
				data={
					"message": "Search under %s returned %s"
					% (base_dn, result.get("description"))
				}
			)
		return [
			DirectoryEntry.from_attributes(r.get("dn"), r.get("raw_attributes", {}))
			for r in connection.response or []
			if r.get("type") == SEARCH_RESULT_ENTRY
		]

	def close(self, connection: ldap3.Connection) -> None:
		try:
			connection.unbind()
		except LDAPException as ex:
			logger.warning("Could not unbind LDAP connection cleanly: %s", ex)
