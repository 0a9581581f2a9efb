from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DisplayOption",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "name",
                    models.CharField(
                        choices=[
                            ("view", "Display position"),
                            ("mode", "Display mode"),
                            ("title", "Widget title"),
                            ("button_style", "Button style"),
                            ("button_color", "Button color"),
                            ("list_type", "List type"),
                        ],
                        max_length=50,
                        unique=True,
                    ),
                ),
                ("value", models.CharField(blank=True, max_length=255)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
    ]
