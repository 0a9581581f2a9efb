"""
Entry points for placing the key points widget on a page.

* ``render_manual`` - explicit placement (shortcode or template tag)
* ``append_to_content`` - automatic placement around a post's main content
* ``should_load_assets`` - whether the page needs the widget's CSS/JS
"""
import logging
from dataclasses import dataclass
from functools import partial

from django.utils.html import format_html
from django.utils.safestring import mark_safe
from django.utils.translation import gettext_lazy as _

from keypoints.summary import stores
from keypoints.summary.models import OptionKey
from keypoints.summary.rendering import WRAPPER_MARKER, clean_points, render
from keypoints.summary.resolver import call_site_tier, resolve
from keypoints.summary.shortcodes import expand_shortcodes, has_shortcode

logger = logging.getLogger(__name__)

FALLBACK_NOTICE = _("No key points have been set for this post.")


@dataclass(frozen=True)
class PageContext:
    """Where the content being rendered sits on the page."""

    is_singular: bool = True
    in_main_content: bool = True
    is_admin: bool = False

    @property
    def qualifies(self):
        return self.is_singular and self.in_main_content and not self.is_admin


SINGULAR_PAGE = PageContext()
LISTING_PAGE = PageContext(is_singular=False)


def _is_unset_id(item_id):
    return item_id is None or str(item_id).strip() in ("", "0")


def render_manual(item_id=None, current_item_id=None, content="", **attrs):
    """Render the widget for ``item_id`` (or the current item) with call-site overrides.

    Returns the fallback notice when the item has no key points.
    """
    target_id = current_item_id if _is_unset_id(item_id) else item_id
    points = clean_points(stores.get_points(target_id))
    if not points:
        return format_html("<p>{}</p>", FALLBACK_NOTICE)

    config = resolve([call_site_tier(**attrs), stores.get_global_settings()])
    logger.debug("Manual key points placement for item %s with %s", target_id, config)
    return render(points, config, content or "")


def append_to_content(content, item_id, context=SINGULAR_PAGE):
    """Place the widget above or below ``content`` for a single item's page.

    Returns ``content`` unchanged outside singular main content, when the widget
    is already present or when the item has no key points.
    """
    content = content or ""
    if not context.qualifies:
        return content
    if WRAPPER_MARKER in content:
        logger.debug("Key points already present in content for item %s", item_id)
        return content

    points = clean_points(stores.get_points(item_id))
    if not points:
        return content

    config = resolve([stores.get_item_overrides(item_id), stores.get_global_settings()])
    logger.debug("Appending key points for item %s with %s", item_id, config)
    block = render(points, config)
    if config.is_below:
        return mark_safe(content) + block
    return block + mark_safe(content)


def should_load_assets(post, context=SINGULAR_PAGE):
    if post is None or not context.is_singular:
        return False
    return has_shortcode(post.content) or bool(clean_points(stores.get_points(post.pk)))


def _render_shortcode(attrs, inner_content, current_item_id=None):
    options = {key: attrs.get(key, "") for key in OptionKey.values}
    return render_manual(
        item_id=attrs.get("id"),
        current_item_id=current_item_id,
        content=inner_content or "",
        **options,
    )


def render_post_content(post, context=SINGULAR_PAGE):
    """Full body of a post: shortcodes expanded, then the automatic widget."""
    content = expand_shortcodes(post.content, partial(_render_shortcode, current_item_id=post.pk))
    return append_to_content(content, post.pk, context)
