################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.identity.store
# Contains the Identity Store, every local identity read and write the
# reconciliation engine performs goes through here.

# ---------------------------------- IMPORTS --------------------------------- #
from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.db import DatabaseError
from core.exceptions.identity import PersistenceFailed
from core.identity.cache import AttemptCache
from core.models.group import Group
from core.models.organization import Organization
from core.models.user import User, USER_TYPE_LDAP
from core.models.user_field import (
	UserFieldGroup,
	UserFieldDefinition,
	UserFieldValue,
)
from core.models.user_image import (
	UserImage,
	USER_IMAGE_DEFAULT_CONTENT_TYPE,
	image_checksum,
)
from functools import wraps
from typing import Iterable
import logging
################################################################################

logger = logging.getLogger(__name__)


def persistence_guard(func):
	"""Re-raises database and validation errors as PersistenceFailed."""

	@wraps(func)
	def wrapper(*args, **kwargs):
		try:
			return func(*args, **kwargs)
		except (DatabaseError, ValidationError) as e:
			raise PersistenceFailed(
				data={"message": f"{func.__name__} failed: {e}"}
			) from e

	return wrapper


def normalize_id(value) -> int | None:
	"""Maps configured row ids to int, "none" and blanks to None."""
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, str):
		value = value.strip()
		if not value or value.lower() == "none":
			return None
	try:
		return int(value)
	except (TypeError, ValueError):
		return None


class IdentityStore:
	"""Django ORM backed storage of users, groups, organizations, custom
	fields and user images."""

	# Users
	@persistence_guard
	def get_user_by_login(self, login: str) -> User | None:
		try:
			return User.objects.get(username=login)
		except ObjectDoesNotExist:
			return None

	def new_user(self, login: str, **fields) -> User:
		"""Returns an unsaved directory user."""
		user = User(username=login, user_type=USER_TYPE_LDAP, **fields)
		return user

	@persistence_guard
	def create_user(self, user: User) -> User:
		if user.pk is not None:
			raise ValueError("create_user expects an unsaved User.")
		user.save(force_insert=True)
		logger.info("Created user %s.", user.username)
		return user

	@persistence_guard
	def update_user(self, user: User) -> User:
		user.save()
		logger.debug("Updated user %s.", user.username)
		return user

	def set_user_primary_group(self, user: User, group: Group) -> None:
		user.primary_group = group

	# Groups
	@persistence_guard
	def get_group_by_name(self, name: str) -> Group | None:
		try:
			return Group.objects.get(name=name)
		except ObjectDoesNotExist:
			return None

	@persistence_guard
	def get_group_by_id(self, group_id) -> Group | None:
		group_id = normalize_id(group_id)
		if group_id is None:
			return None
		try:
			return Group.objects.get(pk=group_id)
		except ObjectDoesNotExist:
			return None

	@persistence_guard
	def create_group(self, name: str, **fields) -> Group:
		return Group.objects.create(name=name, **fields)

	@persistence_guard
	def clone_group_as_template(self, template: Group, name: str) -> Group:
		"""Creates a new group named name with every other field copied
		from template."""
		group = Group.objects.create(
			name=name,
			template=template,
			**template.get_copyable_fields(),
		)
		logger.info("Created group %s from template %s.", group.name, template.name)
		return group

	@persistence_guard
	def merge_user_secondary_groups(self, user: User, groups: Iterable[Group]) -> set:
		groups = [g for g in groups if g is not None]
		if groups:
			user.secondary_groups.add(*groups)
		return set(user.secondary_groups.values_list("id", flat=True))

	# Organizations
	@persistence_guard
	def get_or_create_organization_by_name(
		self, name: str, cache: AttemptCache = None
	) -> Organization:
		if cache is not None and name in cache.organizations:
			return cache.organizations[name]
		organization, created = Organization.objects.get_or_create(name=name)
		if created:
			logger.info("Created organization %s.", name)
		if cache is not None:
			cache.organizations[name] = organization
		return organization

	@persistence_guard
	def merge_user_organizations(
		self, user: User, organizations: Iterable[Organization]
	) -> set:
		"""Adds organizations to the user's memberships, never removes any.

		Returns the resulting organization ids.
		"""
		existing = set(user.organizations.values_list("id", flat=True))
		missing = [o for o in organizations if o.pk not in existing]
		if missing:
			user.organizations.add(*missing)
		return existing | {o.pk for o in missing}

	# Custom fields
	@persistence_guard
	def get_or_create_custom_field_group(
		self, name: str, cache: AttemptCache = None
	) -> UserFieldGroup:
		if cache is not None and name in cache.field_groups:
			return cache.field_groups[name]
		field_group, created = UserFieldGroup.objects.get_or_create(name=name)
		if created:
			logger.info("Created user field group %s.", name)
		if cache is not None:
			cache.field_groups[name] = field_group
		return field_group

	@persistence_guard
	def get_or_create_custom_field_definition(
		self,
		code: str,
		name: str,
		field_type: str,
		group: UserFieldGroup,
		cache: AttemptCache = None,
	) -> UserFieldDefinition:
		if cache is not None and code in cache.field_definitions:
			return cache.field_definitions[code]
		definition, created = UserFieldDefinition.objects.get_or_create(
			code=code,
			defaults={"name": name, "type": field_type, "group": group},
		)
		if created:
			logger.info("Created user field definition %s.", code)
		if cache is not None:
			cache.field_definitions[code] = definition
		return definition

	@persistence_guard
	def set_user_custom_field_value(
		self, user: User, definition: UserFieldDefinition, value: str
	) -> UserFieldValue:
		field_value, _ = UserFieldValue.objects.update_or_create(
			user=user,
			definition=definition,
			defaults={"value": value},
		)
		return field_value

	# Images
	@persistence_guard
	def attach_user_avatar_image(
		self,
		user: User,
		data: bytes,
		content_type: str = USER_IMAGE_DEFAULT_CONTENT_TYPE,
	) -> UserImage:
		"""Stores data as an image of the user, reusing an identical one.

		The image only becomes the avatar when the user has none yet.
		"""
		image = UserImage.objects.filter(
			user=user, checksum=image_checksum(data)
		).first()
		if image is None:
			image = UserImage.objects.create(
				user=user, data=data, content_type=content_type
			)
		if user.avatar_id is None:
			user.avatar = image
			user.save(update_fields=["avatar", "modified_at"])
		return image
