################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: core.constants.attrs.ldap
# Contains directory attribute name constants.
################################################################################

LDAP_LOGIN_PLACEHOLDER = "%s"
LDAP_DEFAULT_PORT = 389
LDAP_DEFAULT_SSL_PORT = 636
LDAP_SSL_SCHEME = "ldaps://"
LDAP_PROTOCOL_VERSIONS = (3, 2)

# LDAP Attributes
LDAP_ATTR_EMAIL = "mail"
LDAP_ATTR_UID = "uid"
LDAP_ATTR_FIRST_NAME = "givenName"
LDAP_ATTR_LAST_NAME = "sn"
LDAP_ATTR_COMMON_NAME = "cn"
LDAP_ATTR_ROOM_NUMBER = "roomNumber"
LDAP_ATTR_BUSINESS_CATEGORY = "businessCategory"
LDAP_ATTR_PHONE = "telephoneNumber"
LDAP_ATTR_MOBILE = "mobile"
LDAP_ATTR_EMPLOYEE_NUMBER = "employeeNumber"
LDAP_ATTR_TITLE = "title"
LDAP_ATTR_TELEX = "telexNumber"
LDAP_ATTR_DEPARTMENT_NUMBER = "departmentNumber"
LDAP_ATTR_ORGANIZATION = "o"
LDAP_ATTR_PHOTO = "jpegPhoto"

# Attributes whose values are never decoded as text
LDAP_BINARY_ATTRS = (LDAP_ATTR_PHOTO,)

# Local normalized field names
LOCAL_ATTR_EMAIL = "email"
LOCAL_ATTR_NICKNAME = "nickname"
LOCAL_ATTR_FIRST_NAME = "first_name"
LOCAL_ATTR_LAST_NAME = "last_name"
LOCAL_ATTR_PHOTO = "photo"
LOCAL_PROFILE_ATTRS = (
	LOCAL_ATTR_EMAIL,
	LOCAL_ATTR_NICKNAME,
	LOCAL_ATTR_FIRST_NAME,
	LOCAL_ATTR_LAST_NAME,
)
