from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SummaryConfig(AppConfig):
    name = "keypoints.summary"
    verbose_name = _("Key Points")
