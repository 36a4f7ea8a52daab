################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.models.base
# Contains the Base Model and Base Manager
#
#---------------------------------- IMPORTS -----------------------------------#
from django.db import models
from django.db.models.manager import BaseManager as Manager
from django.db.models.query import QuerySet
from django.utils.translation import gettext_lazy as _
################################################################################

# Never copied when a row is used as a template for a new one
BASE_MODEL_FIELDS = ("id", "created_at", "modified_at")


class BaseManager(Manager.from_queryset(QuerySet)):
	use_in_migrations = False


class BaseModel(models.Model):

	created_at = models.DateTimeField(_("created at"), auto_now_add=True)
	modified_at = models.DateTimeField(_("modified at"), auto_now=True)

	notes = models.TextField(blank=True, null=True)
	objects = BaseManager()

	def __str__(self):
		if hasattr(self, "name"):
			return self.name
		return super(BaseModel, self).__str__()

	class Meta:
		abstract = True
