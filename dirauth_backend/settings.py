################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: dirauth_backend.settings
# Django settings for the directory authentication backend.
# Any option in here can be overridden in local_django_settings.py, see
# local_django_settings_sample.py

# ---------------------------------- IMPORTS --------------------------------- #
from pathlib import Path
import os
################################################################################

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "change-me-in-local-django-settings")
DEBUG = False
ALLOWED_HOSTS = []

INSTALLED_APPS = [
	"django.contrib.contenttypes",
	"django.contrib.auth",
	"rest_framework",
	"core",
]

AUTH_USER_MODEL = "core.User"
AUTHENTICATION_BACKENDS = [
	"core.auth.ldap.LDAPBackend",
]

DATABASES = {
	"default": {
		"ENGINE": "django.db.backends.sqlite3",
		"NAME": BASE_DIR / "db.sqlite3",
	}
}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# LDAP
# Defaults for every LDAP_* setting live in core.ldap.defaults
LDAP_AUTH_ENABLED = True
LDAP_DIRECTORY_TARGETS = []
LDAP_FALLBACK_GROUP_ID = None
LDAP_CONNECT_TIMEOUT = 10
LDAP_RECEIVE_TIMEOUT = 10

LOG_LEVEL = os.environ.get("DIRAUTH_LOG_LEVEL", "INFO")
LOGGING = {
	"version": 1,
	"disable_existing_loggers": False,
	"formatters": {
		"default": {
			"format": "[{asctime}] {levelname} {name}: {message}",
			"style": "{",
		},
	},
	"handlers": {
		"console": {
			"class": "logging.StreamHandler",
			"formatter": "default",
		},
	},
	"loggers": {
		"core": {
			"handlers": ["console"],
			"level": LOG_LEVEL,
			"propagate": False,
		},
		"ldap3": {
			"handlers": ["console"],
			"level": "WARNING",
		},
	},
}

try:
	from .local_django_settings import *
except ImportError:
	pass
