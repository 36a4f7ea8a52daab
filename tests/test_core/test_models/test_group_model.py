import pytest
from core.models.group import Group, GROUP_PERMISSION_ADMIN


@pytest.mark.django_db
class TestGroupModel:
	def test_copyable_fields(self):
		template = Group.objects.create(
			name="Template",
			description="Template group",
			permission_level=GROUP_PERMISSION_ADMIN,
			can_post=False,
			can_upload_files=True,
			can_edit_users=True,
			notes="Do not assign users",
		)
		assert template.get_copyable_fields() == {
			"description": "Template group",
			"permission_level": GROUP_PERMISSION_ADMIN,
			"can_post": False,
			"can_upload_files": True,
			"can_edit_users": True,
			"notes": "Do not assign users",
		}

	def test_clones(self):
		template = Group.objects.create(name="Template")
		clone = Group.objects.create(name="Eng", template=template)
		assert list(template.clones.all()) == [clone]
		template.delete()
		clone.refresh_from_db()
		assert clone.template is None
