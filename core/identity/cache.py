################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.identity.cache
# Contains the lookup cache scoped to a single authentication attempt.

# ---------------------------------- IMPORTS --------------------------------- #
from core.models.group import Group
from core.models.organization import Organization
from core.models.user_field import UserFieldGroup, UserFieldDefinition
################################################################################


class AttemptCache:
	"""Rows looked up or created during one authentication attempt.

	Build one per attempt and drop it afterwards, call clear() whenever the
	writes it may reference were rolled back.
	"""

	def __init__(self):
		self.field_groups: dict[str, UserFieldGroup] = {}
		self.field_definitions: dict[str, UserFieldDefinition] = {}
		self.organizations: dict[str, Organization] = {}
		self.groups: dict[str, Group] = {}

	def clear(self) -> None:
		self.field_groups.clear()
		self.field_definitions.clear()
		self.organizations.clear()
		self.groups.clear()

	def __len__(self):
		return (
			len(self.field_groups)
			+ len(self.field_definitions)
			+ len(self.organizations)
			+ len(self.groups)
		)
