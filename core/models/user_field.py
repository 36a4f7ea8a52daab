################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.models.user_field
# Contains the Models for custom user fields, their groups and values
#
# ---------------------------------- IMPORTS --------------------------------- #
from django.db import models
from django.utils.translation import gettext_lazy as _
from core.models.base import BaseModel
################################################################################

USER_FIELD_TYPE_WORD = "word"
USER_FIELD_TYPE_TEXT = "text"
USER_FIELD_TYPE_PHONE = "phone"
USER_FIELD_TYPE_EMAIL = "email"
USER_FIELD_TYPE_URL = "url"
USER_FIELD_TYPE_CHOICES = (
	(USER_FIELD_TYPE_WORD, _("Single word")),
	(USER_FIELD_TYPE_TEXT, _("Text")),
	(USER_FIELD_TYPE_PHONE, _("Phone number")),
	(USER_FIELD_TYPE_EMAIL, _("Email address")),
	(USER_FIELD_TYPE_URL, _("URL")),
)


class UserFieldGroup(BaseModel):
	id = models.BigAutoField(primary_key=True)
	name = models.CharField(_("name"), max_length=255, unique=True)
	order = models.PositiveIntegerField(_("order"), default=0)

	class Meta:
		db_table = "core_user_field_group"
		ordering = ("order", "id")


class UserFieldDefinition(BaseModel):
	id = models.BigAutoField(primary_key=True)
	code = models.CharField(_("code"), max_length=64, unique=True)
	name = models.CharField(_("name"), max_length=255)
	type = models.CharField(
		_("type"),
		max_length=16,
		choices=USER_FIELD_TYPE_CHOICES,
		default=USER_FIELD_TYPE_WORD,
	)
	group = models.ForeignKey(
		UserFieldGroup,
		verbose_name=_("field group"),
		on_delete=models.CASCADE,
		related_name="definitions",
	)

	class Meta:
		db_table = "core_user_field_definition"


class UserFieldValue(BaseModel):
	id = models.BigAutoField(primary_key=True)
	user = models.ForeignKey(
		"User", on_delete=models.CASCADE, related_name="field_values"
	)
	definition = models.ForeignKey(
		UserFieldDefinition, on_delete=models.CASCADE, related_name="values"
	)
	value = models.TextField(_("value"))

	class Meta:
		db_table = "core_user_field_value"
		constraints = [
			models.UniqueConstraint(
				fields=["user", "definition"],
				name="user_field_value_unique_per_user",
			)
		]

	def __str__(self):
		return f"{self.definition.code}: {self.value}"
