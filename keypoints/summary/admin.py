from django.contrib import admin

from keypoints.summary.models import DisplayOption


@admin.register(DisplayOption)
class DisplayOptionAdmin(admin.ModelAdmin):
    list_display = ["name", "value"]
