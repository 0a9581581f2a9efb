from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date_created", models.DateTimeField(auto_now_add=True)),
                ("date_modified", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=255, unique=True)),
                ("content", models.TextField(blank=True, help_text="Trusted HTML body of the post.")),
                ("is_published", models.BooleanField(default=True)),
                (
                    "key_points",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="Ordered list of key points shown in the summary widget.",
                    ),
                ),
                (
                    "override_settings",
                    models.BooleanField(
                        default=False,
                        help_text="Use this post's display overrides instead of the global display options.",
                    ),
                ),
                (
                    "display_overrides",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Per-post display options keyed by option name (view, mode, title, ...).",
                    ),
                ),
            ],
            options={
                "ordering": ["-date_created"],
            },
        ),
    ]
