import core.models.user
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = []

	operations = [
		migrations.CreateModel(
			name="Group",
			fields=[
				("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
				("modified_at", models.DateTimeField(auto_now=True, verbose_name="modified at")),
				("notes", models.TextField(blank=True, null=True)),
				("id", models.BigAutoField(primary_key=True, serialize=False)),
				("name", models.CharField(max_length=128, unique=True, verbose_name="name")),
				("description", models.CharField(blank=True, max_length=255, null=True, verbose_name="description")),
				(
					"permission_level",
					models.PositiveSmallIntegerField(
						choices=[(0, "None"), (1, "Member"), (5, "Editor"), (10, "Administrator")],
						default=1,
						verbose_name="permission level",
					),
				),
				("can_post", models.BooleanField(default=True, verbose_name="can post")),
				("can_upload_files", models.BooleanField(default=False, verbose_name="can upload files")),
				("can_edit_users", models.BooleanField(default=False, verbose_name="can edit users")),
				(
					"template",
					models.ForeignKey(
						blank=True,
						null=True,
						on_delete=django.db.models.deletion.SET_NULL,
						related_name="clones",
						to="core.group",
						verbose_name="template",
					),
				),
			],
			options={
				"verbose_name": "Group",
				"verbose_name_plural": "Groups",
			},
		),
		migrations.CreateModel(
			name="Organization",
			fields=[
				("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
				("modified_at", models.DateTimeField(auto_now=True, verbose_name="modified at")),
				("notes", models.TextField(blank=True, null=True)),
				("id", models.BigAutoField(primary_key=True, serialize=False)),
				("name", models.CharField(max_length=255, unique=True, verbose_name="name")),
			],
			options={
				"verbose_name": "Organization",
				"verbose_name_plural": "Organizations",
			},
		),
		migrations.CreateModel(
			name="UserFieldGroup",
			fields=[
				("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
				("modified_at", models.DateTimeField(auto_now=True, verbose_name="modified at")),
				("notes", models.TextField(blank=True, null=True)),
				("id", models.BigAutoField(primary_key=True, serialize=False)),
				("name", models.CharField(max_length=255, unique=True, verbose_name="name")),
				("order", models.PositiveIntegerField(default=0, verbose_name="order")),
			],
			options={
				"db_table": "core_user_field_group",
				"ordering": ("order", "id"),
			},
		),
		migrations.CreateModel(
			name="UserFieldDefinition",
			fields=[
				("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
				("modified_at", models.DateTimeField(auto_now=True, verbose_name="modified at")),
				("notes", models.TextField(blank=True, null=True)),
				("id", models.BigAutoField(primary_key=True, serialize=False)),
				("code", models.CharField(max_length=64, unique=True, verbose_name="code")),
				("name", models.CharField(max_length=255, verbose_name="name")),
				(
					"type",
					models.CharField(
						choices=[
							("word", "Single word"),
							("text", "Text"),
							("phone", "Phone number"),
							("email", "Email address"),
							("url", "URL"),
						],
						default="word",
						max_length=16,
						verbose_name="type",
					),
				),
				(
					"group",
					models.ForeignKey(
						on_delete=django.db.models.deletion.CASCADE,
						related_name="definitions",
						to="core.userfieldgroup",
						verbose_name="field group",
					),
				),
			],
			options={
				"db_table": "core_user_field_definition",
			},
		),
		migrations.CreateModel(
			name="User",
			fields=[
				("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
				("modified_at", models.DateTimeField(auto_now=True, verbose_name="modified at")),
				("notes", models.TextField(blank=True, null=True)),
				("id", models.BigAutoField(primary_key=True, serialize=False)),
				("username", models.CharField(max_length=255, unique=True, verbose_name="username")),
				("password", models.CharField(max_length=128, verbose_name="password")),
				("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
				("nickname", models.CharField(blank=True, default="", max_length=255, verbose_name="nickname")),
				("first_name", models.CharField(blank=True, max_length=255, null=True, verbose_name="First name")),
				("last_name", models.CharField(blank=True, max_length=255, null=True, verbose_name="Last name")),
				(
					"email",
					models.EmailField(
						blank=True,
						max_length=254,
						null=True,
						validators=[django.core.validators.EmailValidator()],
						verbose_name="Email",
					),
				),
				(
					"status",
					models.CharField(
						choices=[
							("new", "New"),
							("activated", "Activated"),
							("autoactivated", "Autoactivated"),
							("closed", "Closed"),
						],
						default="new",
						max_length=16,
						verbose_name="status",
					),
				),
				("locale", models.CharField(blank=True, max_length=20, null=True, verbose_name="locale")),
				(
					"user_type",
					models.CharField(
						choices=[("local", "Local User"), ("ldap", "LDAP User")],
						default="local",
						max_length=8,
						verbose_name="User Type",
					),
				),
				(
					"primary_group",
					models.ForeignKey(
						on_delete=django.db.models.deletion.PROTECT,
						related_name="primary_members",
						to="core.group",
						verbose_name="primary group",
					),
				),
				(
					"secondary_groups",
					models.ManyToManyField(
						blank=True,
						related_name="secondary_members",
						to="core.group",
						verbose_name="secondary groups",
					),
				),
				(
					"organizations",
					models.ManyToManyField(
						blank=True,
						related_name="members",
						to="core.organization",
						verbose_name="organizations",
					),
				),
			],
			options={
				"verbose_name": "User",
				"verbose_name_plural": "Users",
			},
			managers=[
				("objects", core.models.user.BaseUserManager()),
			],
		),
		migrations.CreateModel(
			name="UserFieldValue",
			fields=[
				("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
				("modified_at", models.DateTimeField(auto_now=True, verbose_name="modified at")),
				("notes", models.TextField(blank=True, null=True)),
				("id", models.BigAutoField(primary_key=True, serialize=False)),
				("value", models.TextField(verbose_name="value")),
				(
					"definition",
					models.ForeignKey(
						on_delete=django.db.models.deletion.CASCADE,
						related_name="values",
						to="core.userfielddefinition",
					),
				),
				(
					"user",
					models.ForeignKey(
						on_delete=django.db.models.deletion.CASCADE,
						related_name="field_values",
						to="core.user",
					),
				),
			],
			options={
				"db_table": "core_user_field_value",
				"constraints": [
					models.UniqueConstraint(
						fields=("user", "definition"),
						name="user_field_value_unique_per_user",
					)
				],
			},
		),
		migrations.CreateModel(
			name="UserImage",
			fields=[
				("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
				("modified_at", models.DateTimeField(auto_now=True, verbose_name="modified at")),
				("notes", models.TextField(blank=True, null=True)),
				("id", models.BigAutoField(primary_key=True, serialize=False)),
				("data", models.BinaryField(verbose_name="data")),
				(
					"content_type",
					models.CharField(default="image/jpeg", max_length=64, verbose_name="content type"),
				),
				("checksum", models.CharField(max_length=64, verbose_name="checksum")),
				(
					"user",
					models.ForeignKey(
						on_delete=django.db.models.deletion.CASCADE,
						related_name="images",
						to="core.user",
					),
				),
			],
			options={
				"db_table": "core_user_image",
				"constraints": [
					models.UniqueConstraint(
						fields=("user", "checksum"),
						name="user_image_unique_per_user",
					)
				],
			},
		),
		migrations.AddField(
			model_name="user",
			name="avatar",
			field=models.ForeignKey(
				blank=True,
				null=True,
				on_delete=django.db.models.deletion.SET_NULL,
				related_name="+",
				to="core.userimage",
				verbose_name="avatar",
			),
		),
	]
