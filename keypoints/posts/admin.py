from django.contrib import admin

from keypoints.posts.models import Post
from keypoints.summary.rendering import clean_points


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title", "slug", "is_published", "point_count", "override_settings"]
    list_filter = ["is_published", "override_settings"]
    search_fields = ["title", "slug"]
    readonly_fields = ["slug", "date_created", "date_modified"]
    fieldsets = [
        (None, {"fields": ["title", "slug", "content", "is_published"]}),
        ("Key points", {"fields": ["key_points"]}),
        ("Display", {"fields": ["override_settings", "display_overrides"]}),
        ("Dates", {"fields": ["date_created", "date_modified"]}),
    ]

    @admin.display(description="Key points")
    def point_count(self, obj):
        return len(clean_points(obj.key_points))
