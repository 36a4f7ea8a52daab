import pytest
from django.db import transaction
from django.db.utils import IntegrityError
from hashlib import sha256
from core.models.group import Group
from core.models.user import User
from core.models.user_image import UserImage, image_checksum
from core.models.user_field import (
	UserFieldGroup,
	UserFieldDefinition,
	UserFieldValue,
)


@pytest.fixture
def f_user(db):
	return User.objects.create(
		username="jdoe", primary_group=Group.objects.create(name="Users")
	)


def test_image_checksum():
	assert image_checksum(b"photo") == sha256(b"photo").hexdigest()


@pytest.mark.django_db
class TestUserImage:
	def test_checksum_on_save(self, f_user):
		image = UserImage.objects.create(user=f_user, data=b"\xff\xd8photo")
		assert image.checksum == image_checksum(b"\xff\xd8photo")
		assert image.content_type == "image/jpeg"
		assert str(image) == f"user_{f_user.pk}_image_{image.checksum[:8]}"

	def test_unique_per_user(self, f_user):
		UserImage.objects.create(user=f_user, data=b"\xff\xd8photo")
		with pytest.raises(IntegrityError):
			with transaction.atomic():
				UserImage.objects.create(user=f_user, data=b"\xff\xd8photo")


@pytest.mark.django_db
class TestUserFields:
	def test_one_value_per_user_and_definition(self, f_user):
		group = UserFieldGroup.objects.create(name="Phone")
		definition = UserFieldDefinition.objects.create(
			code="officephone", name="Office phone", type="phone", group=group
		)
		value = UserFieldValue.objects.create(
			user=f_user, definition=definition, value="+1 555 0100"
		)
		assert str(value) == "officephone: +1 555 0100"
		assert list(f_user.field_values.all()) == [value]
		with pytest.raises(IntegrityError):
			with transaction.atomic():
				UserFieldValue.objects.create(
					user=f_user, definition=definition, value="+1 555 0101"
				)
