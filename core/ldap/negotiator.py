################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.negotiator
# Contains the LDAP protocol version negotiation and credential bind.

# ---------------------------------- IMPORTS --------------------------------- #
from core.constants.attrs.ldap import LDAP_PROTOCOL_VERSIONS
from core.exceptions import ldap as exc_ldap
from core.ldap.client import DirectoryClient
from core.ldap.filter import substitute_rdn
from core.ldap.targets import DirectoryTarget, ProtocolVersionPolicy
import logging
################################################################################

logger = logging.getLogger(__name__)


def candidate_versions(policy: ProtocolVersionPolicy, initial: int | None) -> list[int]:
	"""Returns protocol versions to try, in order.

	A fixed policy only ever tries its own version. Auto tries the
	connection's current version first, then 3 and 2.
	"""
	if not policy.is_auto:
		return [policy.fixed_version]
	candidates = []
	for version in (initial, *LDAP_PROTOCOL_VERSIONS):
		if version is None or version in candidates:
			continue
		candidates.append(version)
	return candidates


def negotiate(
	client: DirectoryClient,
	connection,
	target: DirectoryTarget,
	login: str,
	secret: str,
	initial: int | None = None,
) -> int:
	"""Binds the connection as the login's RDN, returns the bound version.

	The negotiated version is left on the connection on success, on failure
	the initial one is restored and BindFailed is raised.
	"""
	if initial is None:
		initial = client.get_protocol_version(connection)
	rdn = substitute_rdn(target.bind_rdn_template, login)
	logger.debug("Using RDN %s for binding to %s", rdn, target)

	for version in candidate_versions(target.protocol_version_policy, initial):
		client.set_protocol_version(connection, version)
		if client.bind(connection, rdn, secret):
			logger.debug("Bound to %s with protocol version %s", target, version)
			return version
		logger.debug(
			"Could not bind to %s with protocol version %s", target, version
		)

	if initial is not None:
		client.set_protocol_version(connection, initial)
	raise exc_ldap.BindFailed(
		data={
			"message": "Could not bind to %s (protocol %s)"
			% (target, target.protocol_version_policy)
		}
	)
