################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.models.user
# Contains the Model for Directory Synced and Local Users
#
# --------------------------------- IMPORTS ---------------------------------- #
from django.contrib.auth.base_user import (
	BaseUserManager as DjangoBaseUserManager,
)
from django.contrib.auth.hashers import (
	make_password,
	check_password,
	is_password_usable,
)
from django.db import models
from django.utils.crypto import salted_hmac
from django.utils.translation import gettext_lazy as _
from django.core.validators import validate_email

from core.models.base import BaseModel
import secrets
# ---------------------------------------------------------------------------- #

USER_STATUS_NEW = "new"
USER_STATUS_ACTIVATED = "activated"
USER_STATUS_AUTOACTIVATED = "autoactivated"
USER_STATUS_CLOSED = "closed"
USER_STATUS_CHOICES = (
	(USER_STATUS_NEW, _("New")),
	(USER_STATUS_ACTIVATED, _("Activated")),
	(USER_STATUS_AUTOACTIVATED, _("Autoactivated")),
	(USER_STATUS_CLOSED, _("Closed")),
)
USER_TYPE_LOCAL = "local"
USER_TYPE_LDAP = "ldap"
USER_TYPE_CHOICES = (
	(USER_TYPE_LOCAL, f"{USER_TYPE_LOCAL.capitalize()} User"),
	(USER_TYPE_LDAP, f"{USER_TYPE_LDAP.upper()} User"),
)
# Length of the urlsafe token used as local password of directory users
USER_OPAQUE_PASSWORD_BYTES = 48


class BaseUserManager(DjangoBaseUserManager):
	use_in_migrations = True

	def _create_user(self, username, password, **extra_fields):
		"""
		Create and save a user with the given username and password.
		"""
		if not username:
			raise ValueError("Users must have a username")
		user = self.model(username=username, **extra_fields)
		user.set_password(password)
		user.save(using=self._db)
		return user

	def create_user(self, username=None, password=None, **extra_fields):
		return self._create_user(username, password, **extra_fields)


class BaseUser(BaseModel):
	USERNAME_FIELD = "username"
	EMAIL_FIELD = "email"
	REQUIRED_FIELDS = []
	objects = BaseUserManager()

	id = models.BigAutoField(primary_key=True)
	username = models.CharField(
		_("username"), max_length=255, unique=True, null=False, blank=False
	)
	password = models.CharField(_("password"), max_length=128)
	last_login = models.DateTimeField(_("last login"), blank=True, null=True)

	def __str__(self):
		return self.username

	def get_username(self):
		return self.username

	def natural_key(self):
		return (self.get_username(),)

	@property
	def date_joined(self):
		return self.created_at

	@property
	def is_anonymous(self):
		"""
		Always return False. This is a way of comparing User objects to
		anonymous users.
		"""
		return False

	@property
	def is_authenticated(self):
		"""
		Always return True. This is a way to tell if the user has been
		authenticated in templates.
		"""
		return True

	def set_password(self, raw_password):
		self.password = make_password(raw_password)
		self._password = raw_password

	def set_opaque_password(self):
		"""Replaces the local password with a random one nobody knows."""
		self.set_password(secrets.token_urlsafe(USER_OPAQUE_PASSWORD_BYTES))
		self._password = None

	def check_password(self, raw_password):
		"""
		Return a boolean of whether the raw_password was correct. Handles
		hashing formats behind the scenes.
		"""

		def setter(raw_password):
			self.set_password(raw_password)
			# Password hash upgrades shouldn't be considered password changes.
			self._password = None
			self.save(update_fields=["password"])

		return check_password(raw_password, self.password, setter)

	def set_unusable_password(self):
		# Set a value that will never be a valid hash
		self.password = make_password(None)

	def has_usable_password(self):
		"""
		Return False if set_unusable_password() has been called for this user.
		"""
		return is_password_usable(self.password)

	def get_session_auth_hash(self):
		"""
		Return an HMAC of the password field.
		"""
		key_salt = "django.contrib.auth.models.AbstractBaseUser.get_session_auth_hash"
		return salted_hmac(key_salt, self.password).hexdigest()

	@classmethod
	def get_email_field_name(cls):
		return cls.EMAIL_FIELD

	@classmethod
	def normalize_username(cls, username):
		return username

	class Meta:
		abstract = True


class User(BaseUser):
	nickname = models.CharField(_("nickname"), max_length=255, blank=True, default="")
	first_name = models.CharField(_("First name"), max_length=255, null=True, blank=True)
	last_name = models.CharField(_("Last name"), max_length=255, null=True, blank=True)
	email = models.EmailField(_("Email"), null=True, blank=True, validators=[validate_email])
	status = models.CharField(
		_("status"),
		max_length=16,
		choices=USER_STATUS_CHOICES,
		default=USER_STATUS_NEW,
	)
	locale = models.CharField(_("locale"), max_length=20, null=True, blank=True)
	user_type = models.CharField(
		_("User Type"),
		max_length=8,
		choices=USER_TYPE_CHOICES,
		null=False,
		blank=False,
		default=USER_TYPE_LOCAL,
	)
	primary_group = models.ForeignKey(
		"Group",
		verbose_name=_("primary group"),
		on_delete=models.PROTECT,
		related_name="primary_members",
	)
	secondary_groups = models.ManyToManyField(
		"Group",
		verbose_name=_("secondary groups"),
		blank=True,
		related_name="secondary_members",
	)
	organizations = models.ManyToManyField(
		"Organization",
		verbose_name=_("organizations"),
		blank=True,
		related_name="members",
	)
	avatar = models.ForeignKey(
		"UserImage",
		verbose_name=_("avatar"),
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name="+",
	)

	class Meta:
		verbose_name = _("User")
		verbose_name_plural = _("Users")

	@property
	def is_active(self):
		return self.status != USER_STATUS_CLOSED

	def is_user_local(self):
		return self.user_type == USER_TYPE_LOCAL
