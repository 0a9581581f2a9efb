from itertools import count

from django.db import models
from django.utils.text import slugify


class TimestampedModel(models.Model):
    date_created = models.DateTimeField(auto_now_add=True)
    date_modified = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


def unique_slug(text, queryset, slugfield="slug", fallback="post"):
    """Slug for ``text`` not yet used by ``queryset``; clashes get ``-1``, ``-2``, ... appended."""
    base = slugify(text) or fallback
    for suffix in count():
        candidate = f"{base}-{suffix}" if suffix else base
        if not queryset.filter(**{slugfield: candidate}).exists():
            return candidate
