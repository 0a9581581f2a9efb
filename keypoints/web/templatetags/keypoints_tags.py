from django import template
from django.templatetags.static import static
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from keypoints.summary.services import SINGULAR_PAGE, append_to_content, render_manual, should_load_assets

register = template.Library()


@register.simple_tag(takes_context=True)
def key_points(context, id=None, **attrs):
    """
    Renders the key points widget at the tag's position.
    :param context: The context where the tag was called. ``post`` is used as the current item.
    :param id: Optional id of the post whose key points are shown.
    :param attrs: Optional display overrides: view, mode, title, button_style, button_color, list_type.
    :return:
    """
    post = context.get("post")
    current_item_id = post.pk if post is not None else None
    return render_manual(item_id=id, current_item_id=current_item_id, **attrs)


@register.filter
def with_key_points(content, post):
    """
    Places the post's key points widget around its main content.
    Usage: {{ post.content|with_key_points:post }}
    """
    if post is None:
        return content
    return mark_safe(append_to_content(content, post.pk, SINGULAR_PAGE))


@register.simple_tag
def keypoints_assets(post):
    """Stylesheet and script tags for the widget, only on pages that show it."""
    if not should_load_assets(post):
        return ""
    return format_html(
        '<link rel="stylesheet" href="{}"><script src="{}" defer></script>',
        static("keypoints/css/keypoints.css"),
        static("keypoints/js/keypoints.js"),
    )
