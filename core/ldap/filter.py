################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.filter
# Contains login substitution helpers for DN and search filter templates.

# ---------------------------------- IMPORTS --------------------------------- #
from ldap3.utils.conv import escape_filter_chars
from ldap3.core.exceptions import LDAPException
from ldap3.utils.dn import escape_rdn, parse_dn
from core.constants.attrs.ldap import LDAP_LOGIN_PLACEHOLDER
################################################################################


def is_encapsulated(v: str) -> bool:
	"""Check if a string is wrapped in parentheses."""
	if not isinstance(v, str):
		raise TypeError("is_encapsulated value must be of type str.")
	return v.startswith("(") and v.endswith(")")


def encapsulate(v: str) -> str:
	"""Properly encapsulate LDAP filter string"""
	v = v.strip()
	if is_encapsulated(v):
		return v
	return f"({v})"


def has_login_placeholder(template: str) -> bool:
	return isinstance(template, str) and LDAP_LOGIN_PLACEHOLDER in template


def is_dn_template(template: str) -> bool:
	try:
		parse_dn(template)
	except LDAPException:
		return False
	return True


def substitute_rdn(template: str, login: str) -> str:
	"""Replaces every login placeholder in a bind RDN template.

	The login is only escaped when the template is a DN, UPN (``%s@corp.example``)
	and down-level (``CORP\\%s``) templates take it as is.
	"""
	if is_dn_template(template):
		login = escape_rdn(login)
	return template.replace(LDAP_LOGIN_PLACEHOLDER, login)


def substitute_filter(template: str, login: str) -> str:
	"""Replaces every login placeholder in a search filter template and
	wraps the result in parentheses when needed."""
	return encapsulate(
		template.replace(LDAP_LOGIN_PLACEHOLDER, escape_filter_chars(login))
	)
