from django.core.management.base import BaseCommand, CommandError
from core.auth.ldap import LDAPBackend
from core.config.directory import DirectorySettings
from getpass import getpass


class Command(BaseCommand):
	help = "Runs one directory authentication attempt with the configured servers"

	def add_arguments(self, parser):
		parser.add_argument("login", type=str)
		parser.add_argument(
			"--password",
			type=str,
			default=None,
			help="Prompted for when omitted",
		)

	def handle(self, *args, **options):
		login = options["login"]
		password = options["password"]
		if password is None:
			password = getpass("Password for %s: " % login)
		if not password:
			raise CommandError("A password is required.")

		config = DirectorySettings.from_settings()
		self.stdout.write(
			"%d directory server set(s) configured." % len(config.targets)
		)
		result = LDAPBackend().get_authenticator(config).authenticate(login, password)
		if not result.accepted:
			raise CommandError("Login %s was not accepted." % login)

		target = next(t for t in config.targets if t.index == result.target_index)
		self.stdout.write(
			self.style.SUCCESS(
				"Login %s accepted by directory server %s, local user id %s."
				% (login, target, result.user.pk)
			)
		)
