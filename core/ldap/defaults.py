################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.ldap.defaults
from core.constants.attrs.ldap import *

### LDAP SETTINGS
# Every value in here may be overridden with a setting of the same name in
# dirauth_backend.settings (or its local_django_settings override).

# Set this to False to refuse every directory authentication attempt.
LDAP_AUTH_ENABLED = True

# Ordered list of directory server sets, each one a dict, e.g.:
# {
# 	"server": "ldap.example.com:389",
# 	"bind_rdn": "uid=%s,ou=People,dc=example,dc=com",
# 	"search_base_dn": "ou=People,dc=example,dc=com",
# 	"search_filter": "uid=%s",
# 	"protocol_version": "auto",
# 	"group_assignment_attribute": "department",
# 	"group_template_id": None,
# 	"secondary_group_base_dn": "ou=Groups,dc=example,dc=com",
# 	"secondary_group_filter": "(&(objectClass=posixGroup)(memberUid=%s))",
# 	"attribute_map": {"email": "mail"},
# 	"disabled": False,
# }
LDAP_DIRECTORY_TARGETS = []

# Only this many server sets are ever consulted.
LDAP_MAX_DIRECTORY_TARGETS = 10

# Group ID for users whose group could not be resolved from directory data.
# None will refuse to create such users.
LDAP_FALLBACK_GROUP_ID = None

# Set connection/receive timeouts (in seconds) on the underlying `ldap3` library.
LDAP_CONNECT_TIMEOUT = 10
LDAP_RECEIVE_TIMEOUT = 10

PROTOCOL_VERSION_AUTO = "auto"
PROTOCOL_VERSION_CHOICES = (
	PROTOCOL_VERSION_AUTO,
	"3",
	"2",
)

# Local profile fields mapped to the directory attributes that represent them.
LDAP_FIELD_MAP = {
	LOCAL_ATTR_EMAIL: LDAP_ATTR_EMAIL,
	LOCAL_ATTR_NICKNAME: LDAP_ATTR_UID,
	LOCAL_ATTR_FIRST_NAME: LDAP_ATTR_FIRST_NAME,
	LOCAL_ATTR_LAST_NAME: LDAP_ATTR_LAST_NAME,
	LOCAL_ATTR_PHOTO: LDAP_ATTR_PHOTO,
}

# Directory attribute: (field code, field name, field group name, field type)
LDAP_USER_FIELD_MAP = {
	LDAP_ATTR_ROOM_NUMBER: ("roomnumber", "Room Number", "Address", "word"),
	LDAP_ATTR_BUSINESS_CATEGORY: (
		"businesscategory",
		"Business Category",
		"About me",
		"text",
	),
	LDAP_ATTR_PHONE: ("officephone", "Office phone", "Phone", "phone"),
	LDAP_ATTR_MOBILE: ("cellphone", "Cell phone", "Phone", "phone"),
	LDAP_ATTR_EMPLOYEE_NUMBER: (
		"employeenumber",
		"Employee Number",
		"About me",
		"word",
	),
	LDAP_ATTR_TITLE: ("title", "Title", "About me", "word"),
	LDAP_ATTR_TELEX: ("officefax", "Office FAX", "Phone", "phone"),
}

# Each of these becomes an Organization membership when present.
LDAP_ORGANIZATION_ATTRS = (
	LDAP_ATTR_DEPARTMENT_NUMBER,
	LDAP_ATTR_ORGANIZATION,
)

# Attributes requested by the secondary group search
LDAP_SECONDARY_GROUP_ATTRS = [LDAP_ATTR_COMMON_NAME]
