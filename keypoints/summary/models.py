from django.db import models
from django.utils.translation import gettext_lazy as _


class OptionKey(models.TextChoices):
    VIEW = "view", _("Display position")
    MODE = "mode", _("Display mode")
    TITLE = "title", _("Widget title")
    BUTTON_STYLE = "button_style", _("Button style")
    BUTTON_COLOR = "button_color", _("Button color")
    LIST_TYPE = "list_type", _("List type")


class DisplayOption(models.Model):
    """Site-wide default for one widget display option."""

    name = models.CharField(max_length=50, choices=OptionKey.choices, unique=True)
    value = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name}={self.value}"
