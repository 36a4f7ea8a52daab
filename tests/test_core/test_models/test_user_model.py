import pytest
from django.db import transaction
from django.db.utils import IntegrityError
from core.models.group import Group
from core.models.user import (
	User,
	USER_TYPE_LOCAL,
	USER_TYPE_LDAP,
	USER_STATUS_NEW,
	USER_STATUS_CLOSED,
	USER_STATUS_AUTOACTIVATED,
)


@pytest.mark.django_db
class TestUserModel:
	@pytest.fixture
	def f_group(self):
		return Group.objects.create(name="Users")

	def test_create_user_minimal(self, f_group):
		"""Test creating a user with minimal required fields"""
		user = User.objects.create(username="test_create_user_minimal", primary_group=f_group)
		assert user.pk is not None
		assert user.user_type == USER_TYPE_LOCAL
		assert user.status == USER_STATUS_NEW
		assert user.nickname == ""
		assert user.avatar is None
		assert user.is_user_local() is True
		assert user.is_active is True
		assert str(user) == "test_create_user_minimal"

	def test_create_user_full(self, f_group):
		"""Test creating a user with all fields"""
		user = User.objects.create(
			username="test_create_user_full",
			nickname="jd",
			first_name="John",
			last_name="Doe",
			email="john.doe@example.com",
			locale="es",
			status=USER_STATUS_AUTOACTIVATED,
			user_type=USER_TYPE_LDAP,
			primary_group=f_group,
		)
		user.refresh_from_db()
		assert user.first_name == "John"
		assert user.last_name == "Doe"
		assert user.email == "john.doe@example.com"
		assert user.locale == "es"
		assert user.is_user_local() is False
		assert user.get_username() == "test_create_user_full"
		assert user.natural_key() == ("test_create_user_full",)

	def test_username_is_unique(self, f_group):
		User.objects.create(username="jdoe", primary_group=f_group)
		with pytest.raises(IntegrityError):
			with transaction.atomic():
				User.objects.create(username="jdoe", primary_group=f_group)

	def test_primary_group_is_required(self):
		with pytest.raises(IntegrityError):
			with transaction.atomic():
				User.objects.create(username="jdoe")

	def test_closed_user_is_inactive(self, f_group):
		user = User(username="jdoe", status=USER_STATUS_CLOSED, primary_group=f_group)
		assert user.is_active is False

	def test_create_user_manager(self, f_group):
		user = User.objects.create_user(
			username="jdoe", password="somepassword", primary_group=f_group
		)
		assert user.check_password("somepassword")
		assert not user.check_password("other")

	def test_create_user_manager_requires_username(self):
		with pytest.raises(ValueError):
			User.objects.create_user(username="", password="somepassword")

	def test_opaque_password(self, f_group):
		user = User(username="jdoe", primary_group=f_group)
		user.set_opaque_password()
		first = user.password
		assert user.has_usable_password()
		assert user._password is None
		user.set_opaque_password()
		assert user.password != first

	def test_unusable_password(self):
		user = User(username="jdoe")
		user.set_unusable_password()
		assert not user.has_usable_password()

	def test_authentication_flags(self):
		user = User(username="jdoe")
		assert user.is_authenticated is True
		assert user.is_anonymous is False
		assert user.get_session_auth_hash()

	def test_memberships(self, f_group):
		user = User.objects.create(username="jdoe", primary_group=f_group)
		staff = Group.objects.create(name="Staff")
		user.secondary_groups.add(staff)
		assert list(staff.secondary_members.all()) == [user]
		assert list(f_group.primary_members.all()) == [user]
