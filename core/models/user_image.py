################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.models.user_image
# Contains the Model for image assets attached to a user
#
# ---------------------------------- IMPORTS --------------------------------- #
from django.db import models
from django.utils.translation import gettext_lazy as _
from core.models.base import BaseModel
from hashlib import sha256
################################################################################

USER_IMAGE_DEFAULT_CONTENT_TYPE = "image/jpeg"


def image_checksum(data: bytes) -> str:
	return sha256(data).hexdigest()


class UserImage(BaseModel):
	id = models.BigAutoField(primary_key=True)
	user = models.ForeignKey(
		"User", on_delete=models.CASCADE, related_name="images"
	)
	data = models.BinaryField(_("data"))
	content_type = models.CharField(
		_("content type"),
		max_length=64,
		default=USER_IMAGE_DEFAULT_CONTENT_TYPE,
	)
	checksum = models.CharField(_("checksum"), max_length=64)

	class Meta:
		db_table = "core_user_image"
		constraints = [
			models.UniqueConstraint(
				fields=["user", "checksum"],
				name="user_image_unique_per_user",
			)
		]

	def save(self, *args, **kwargs):
		self.checksum = image_checksum(bytes(self.data))
		super().save(*args, **kwargs)

	def __str__(self):
		return f"user_{self.user_id}_image_{self.checksum[:8]}"
