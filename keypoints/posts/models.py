from django.db import models
from django.urls import reverse
from django.utils.html import strip_tags
from django.utils.text import Truncator
from django.utils.translation import gettext_lazy as _

from keypoints.summary.shortcodes import strip_shortcodes
from keypoints.utils.db import TimestampedModel, unique_slug


class Post(TimestampedModel):
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField(blank=True, help_text=_("Trusted HTML body of the post."))
    is_published = models.BooleanField(default=True)
    key_points = models.JSONField(
        default=list,
        blank=True,
        help_text=_("Ordered list of key points shown in the summary widget."),
    )
    override_settings = models.BooleanField(
        default=False,
        help_text=_("Use this post's display overrides instead of the global display options."),
    )
    display_overrides = models.JSONField(
        default=dict,
        blank=True,
        help_text=_("Per-post display options keyed by option name (view, mode, title, ...)."),
    )

    class Meta:
        ordering = ["-date_created"]

    def save(self, *args, **kwargs):
        if not self.id:
            self.slug = unique_slug(self.title, Post.objects.all())
        super().save(*args, **kwargs)

    @property
    def excerpt(self):
        return Truncator(strip_tags(strip_shortcodes(self.content))).words(40)

    def get_absolute_url(self):
        return reverse("posts:detail", args=(self.slug,))

    def __str__(self):
        return self.title
