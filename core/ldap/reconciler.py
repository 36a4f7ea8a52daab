################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.reconciler
# Contains the directory authentication engine, which binds against the
# configured server sets in order and reconciles the first usable entry into
# the local identity store.

# ---------------------------------- IMPORTS --------------------------------- #
from dataclasses import dataclass
from enum import Enum
from django.db import transaction
from core.exceptions import ldap as exc_ldap, identity as exc_identity
from core.identity.cache import AttemptCache
from core.identity.store import IdentityStore
from core.ldap.client import DirectoryClient
from core.ldap.connector import TargetConnection
from core.ldap.resolver import NormalizedAttributes, resolve_identity
from core.ldap.targets import DirectoryTarget, iter_enabled_targets
from core.models.group import Group
from core.models.user import User, USER_STATUS_AUTOACTIVATED
import logging
################################################################################

logger = logging.getLogger(__name__)

# Conditions that abandon the current target, the next one is tried instead
TARGET_FAILURES = (
	exc_ldap.ConnectFailed,
	exc_ldap.BindFailed,
	exc_ldap.SearchFailed,
	exc_ldap.AmbiguousOrMissingEntry,
	exc_identity.GroupAssignmentUnavailable,
	exc_identity.PersistenceFailed,
)


class AuthenticationState(Enum):
	NOT_STARTED = "not_started"
	PER_TARGET_ATTEMPT = "per_target_attempt"
	SUCCEEDED = "succeeded"
	FAILED = "failed"


@dataclass(frozen=True)
class AuthenticationResult:
	accepted: bool
	user: User | None = None
	target_index: int | None = None
	# Directory binds need the clear text secret, a digest is never enough
	raw_secret_required: bool = True

	def __bool__(self):
		return self.accepted


class DirectoryAuthenticator:
	"""Authenticates a login against the directory server sets of config.

	Every target failure is logged and absorbed, callers only ever get an
	AuthenticationResult back.
	"""

	def __init__(self, client: DirectoryClient, store: IdentityStore, config):
		self.client = client
		self.store = store
		self.config = config
		self.state = AuthenticationState.NOT_STARTED

	def authenticate(
		self,
		login: str,
		secret: str,
		secret_digest: str = None,
		locale: str = None,
	) -> AuthenticationResult:
		"""Tries each enabled target once, the first one that binds and
		yields a reconciled user wins.

		:param secret_digest: accepted for host compatibility, never used.
		:param locale: locale hint stored on newly created users.
		"""
		self.state = AuthenticationState.NOT_STARTED
		if not login or not secret:
			logger.info("Refusing directory authentication with empty credentials.")
			return self._fail()

		try:
			self._check_available()
		except (exc_ldap.DirectoryUnsupported, exc_ldap.NoTargetsConfigured) as e:
			logger.warning("Directory authentication unavailable: %s", e)
			return self._fail()

		cache = AttemptCache()
		self.state = AuthenticationState.PER_TARGET_ATTEMPT
		for target in iter_enabled_targets(self.config.targets):
			try:
				user = self._authenticate_with_target(
					target, login, secret, locale, cache
				)
			except TARGET_FAILURES as e:
				cache.clear()
				logger.info(
					"Directory server %s did not authenticate %s: %s",
					target,
					login,
					e,
				)
				continue

			self.state = AuthenticationState.SUCCEEDED
			logger.info(
				"User %s authenticated by directory server %s.", login, target
			)
			return AuthenticationResult(
				accepted=True, user=user, target_index=target.index
			)

		logger.info("No directory server authenticated %s.", login)
		return self._fail()

	def _fail(self) -> AuthenticationResult:
		self.state = AuthenticationState.FAILED
		return AuthenticationResult(accepted=False)

	def _check_available(self) -> None:
		if not self.config.enabled or not self.client.is_supported():
			raise exc_ldap.DirectoryUnsupported
		if not any(not t.disabled for t in self.config.targets):
			raise exc_ldap.NoTargetsConfigured

	def _authenticate_with_target(
		self,
		target: DirectoryTarget,
		login: str,
		secret: str,
		locale: str,
		cache: AttemptCache,
	) -> User:
		with TargetConnection(self.client, target) as connection:
			connection.bind(login, secret)
			entry = connection.get_user_entry(login)
			logger.debug("Found entry %s on %s", entry.dn, target)
			attributes = resolve_identity(entry, target.attribute_map)

			with transaction.atomic():
				user = self.store.get_user_by_login(login)
				if user is None:
					user = self._create_user(target, login, locale, attributes, cache)
				else:
					user = self._update_user(user, attributes)
				self._reconcile_custom_fields(user, attributes, cache)
				self._reconcile_organizations(user, attributes, cache)
				self._reconcile_avatar(user, attributes)
				if target.has_secondary_group_search:
					self._reconcile_secondary_groups(
						connection, target, login, user, cache
					)
		return user

	def _create_user(
		self,
		target: DirectoryTarget,
		login: str,
		locale: str,
		attributes: NormalizedAttributes,
		cache: AttemptCache,
	) -> User:
		user = self.store.new_user(login, **attributes.profile_fields())
		if not user.nickname:
			user.nickname = login
		user.locale = locale
		user.status = USER_STATUS_AUTOACTIVATED
		user.set_opaque_password()
		self.store.set_user_primary_group(
			user, self._resolve_primary_group(target, attributes, cache)
		)
		return self.store.create_user(user)

	def _update_user(self, user: User, attributes: NormalizedAttributes) -> User:
		# Absent attributes leave the local values alone, so does the
		# primary group which administrators may have changed.
		for field_name, value in attributes.profile_fields().items():
			setattr(user, field_name, value)
		user.set_opaque_password()
		user.status = USER_STATUS_AUTOACTIVATED
		return self.store.update_user(user)

	def _resolve_primary_group(
		self,
		target: DirectoryTarget,
		attributes: NormalizedAttributes,
		cache: AttemptCache,
	) -> Group:
		group_name = attributes.value_of(target.group_assignment_attribute)
		if group_name:
			group = self._get_or_clone_group(group_name, target, cache)
			if group is not None:
				return group

		group = self.store.get_group_by_id(self.config.fallback_group_id)
		if group is None:
			raise exc_identity.GroupAssignmentUnavailable(
				data={
					"message": "No group for the new user on %s and no fallback group"
					% target
				}
			)
		logger.debug("Assigning fallback group %s", group.name)
		return group

	def _get_or_clone_group(
		self, name: str, target: DirectoryTarget, cache: AttemptCache
	) -> Group | None:
		"""An existing group named name always wins over a new template clone."""
		if name in cache.groups:
			return cache.groups[name]

		group = self.store.get_group_by_name(name)
		if group is None and target.group_template_id is not None:
			template = self.store.get_group_by_id(target.group_template_id)
			if template is None:
				logger.warning(
					"Template group %s configured on %s does not exist.",
					target.group_template_id,
					target,
				)
			else:
				group = self.store.clone_group_as_template(template, name)

		if group is not None:
			cache.groups[name] = group
		return group

	def _reconcile_custom_fields(
		self, user: User, attributes: NormalizedAttributes, cache: AttemptCache
	) -> None:
		for mapping in attributes.custom_fields:
			field_group = self.store.get_or_create_custom_field_group(
				mapping.group_name, cache
			)
			definition = self.store.get_or_create_custom_field_definition(
				mapping.code,
				mapping.name,
				mapping.type,
				field_group,
				cache,
			)
			self.store.set_user_custom_field_value(user, definition, mapping.value)

	def _reconcile_organizations(
		self, user: User, attributes: NormalizedAttributes, cache: AttemptCache
	) -> None:
		if not attributes.organizations:
			return
		organizations = [
			self.store.get_or_create_organization_by_name(name, cache)
			for name in attributes.organizations
		]
		self.store.merge_user_organizations(user, organizations)

	def _reconcile_avatar(self, user: User, attributes: NormalizedAttributes) -> None:
		if attributes.photo:
			self.store.attach_user_avatar_image(user, attributes.photo)

	def _reconcile_secondary_groups(
		self,
		connection: TargetConnection,
		target: DirectoryTarget,
		login: str,
		user: User,
		cache: AttemptCache,
	) -> None:
		"""Best effort, failures are logged and never abandon the target."""
		try:
			with transaction.atomic():
				groups = []
				for name in connection.get_secondary_group_names(login):
					group = self._get_or_clone_group(name, target, cache)
					if group is None:
						logger.debug("Skipping unknown secondary group %s", name)
						continue
					groups.append(group)
				self.store.merge_user_secondary_groups(user, groups)
		except (exc_ldap.SearchFailed, exc_identity.PersistenceFailed) as e:
			# Groups cloned inside the rolled back savepoint are gone
			cache.groups.clear()
			logger.warning(
				"Secondary group search for %s on %s failed: %s", login, target, e
			)
