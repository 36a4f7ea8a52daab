# pragma: no cover
# File: dirauth_backend/local_django_settings_sample.py
# Any option in dirauth_backend.settings can be overridden here.

# If you want to debug
# DEBUG = True or False

# SECRET_KEY = "SomeLongRandomString"

# DATABASES = {
# 	"default": {
# 		"ENGINE": "django.db.backends.postgresql",
# 		"NAME": "SomeDatabase",
# 		"USER": "SomeUser",
# 		"PASSWORD": "SomePassword",  # Change this password
# 		"HOST": "127.0.0.1",  # Or an IP Address that your DB is hosted on
# 		"PORT": "5432",
# 	}
# }

LDAP_DIRECTORY_TARGETS = [
	{
		"server": "ldap.example.com:389",
		"bind_rdn": "uid=%s,ou=People,dc=example,dc=com",
		"search_base_dn": "ou=People,dc=example,dc=com",
		"search_filter": "(&(objectClass=inetOrgPerson)(uid=%s))",
		"protocol_version": "auto",
		"group_assignment_attribute": "departmentNumber",
		"group_template_id": None,
		# "secondary_group_base_dn": "ou=Groups,dc=example,dc=com",
		# "secondary_group_filter": "(&(objectClass=posixGroup)(memberUid=%s))",
		# "attribute_map": {"nickname": "displayName"},
	},
	# {
	# 	"server": "ldaps://ldap-backup.example.com:636",
	# 	...
	# },
]

# Group assigned to new users when no group could be derived from the
# directory entry. None refuses to create such users.
# LDAP_FALLBACK_GROUP_ID = 1

# DIRAUTH_LOG_LEVEL can be set in the environment instead
# LOGGING["loggers"]["core"]["level"] = "DEBUG"
