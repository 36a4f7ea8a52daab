################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.apps
# Contains the Core App initialization class

# ---------------------------------- IMPORTS --------------------------------- #
from django.apps import AppConfig
from logging import getLogger
################################################################################

logger = getLogger(__name__)


class CoreConfig(AppConfig):
	name = "core"
	default_auto_field = "django.db.models.BigAutoField"

	def ready(self):
		"""Validates the directory settings once so misconfigured server
		sets show up in the logs at startup."""
		# Imports that require the app registry
		# ! Don't move outside of function scope
		from core.config.directory import DirectorySettings

		config = DirectorySettings.from_settings()
		if not config.enabled:
			logger.info("Directory authentication is disabled.")
			return
		logger.info(
			"Directory authentication enabled with %d server set(s).",
			len(config.targets),
		)
