################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.models.group
# Contains the Model for local user Groups
#
# ---------------------------------- IMPORTS --------------------------------- #
from django.db import models
from django.utils.translation import gettext_lazy as _
from core.models.base import BaseModel, BASE_MODEL_FIELDS
################################################################################

GROUP_PERMISSION_NONE = 0
GROUP_PERMISSION_MEMBER = 1
GROUP_PERMISSION_EDITOR = 5
GROUP_PERMISSION_ADMIN = 10
GROUP_PERMISSION_CHOICES = (
	(GROUP_PERMISSION_NONE, _("None")),
	(GROUP_PERMISSION_MEMBER, _("Member")),
	(GROUP_PERMISSION_EDITOR, _("Editor")),
	(GROUP_PERMISSION_ADMIN, _("Administrator")),
)


class Group(BaseModel):
	id = models.BigAutoField(primary_key=True)
	name = models.CharField(_("name"), max_length=128, unique=True)
	template = models.ForeignKey(
		"self",
		verbose_name=_("template"),
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name="clones",
	)
	description = models.CharField(
		_("description"), max_length=255, null=True, blank=True
	)
	permission_level = models.PositiveSmallIntegerField(
		_("permission level"),
		choices=GROUP_PERMISSION_CHOICES,
		default=GROUP_PERMISSION_MEMBER,
	)
	can_post = models.BooleanField(_("can post"), default=True)
	can_upload_files = models.BooleanField(_("can upload files"), default=False)
	can_edit_users = models.BooleanField(_("can edit users"), default=False)

	class Meta:
		verbose_name = _("Group")
		verbose_name_plural = _("Groups")

	def get_copyable_fields(self) -> dict:
		"""Returns the field values a clone of this group inherits."""
		return {
			f.attname: getattr(self, f.attname)
			for f in self._meta.concrete_fields
			if f.name not in BASE_MODEL_FIELDS + ("name", "template")
		}
