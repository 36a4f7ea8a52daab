################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.models.organization
# Contains the Model for Organizations users are members of
#
# ---------------------------------- IMPORTS --------------------------------- #
from django.db import models
from django.utils.translation import gettext_lazy as _
from core.models.base import BaseModel
################################################################################


class Organization(BaseModel):
	id = models.BigAutoField(primary_key=True)
	name = models.CharField(_("name"), max_length=255, unique=True)

	class Meta:
		verbose_name = _("Organization")
		verbose_name_plural = _("Organizations")
