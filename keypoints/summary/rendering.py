from collections.abc import Iterable

from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe

from keypoints.summary.resolver import EffectiveConfig

WRAPPER_MARKER = "keypoints-wrap"
CLEAR_FLOATS = '<div style="clear: both;"></div>'


def clean_points(points) -> list[str]:
    """Drop empty and whitespace-only entries, keeping stored order.

    Anything that is not a list or tuple counts as no points at all.
    """
    if not isinstance(points, (list, tuple)):
        return []
    return [str(point) for point in points if point is not None and str(point).strip()]


def _point_list(points: Iterable[str], config: EffectiveConfig):
    tag = "ol" if config.is_ordered else "ul"
    items = format_html_join("", "<li>{}</li>", ((point,) for point in points))
    return format_html("<{}>{}</{}>", tag, items, tag)


def _popup_block(points, config: EffectiveConfig):
    return format_html(
        '<button class="keypoints-popup-btn {} {}" style="background-color: {};">{}</button>'
        '<div class="keypoints-popup-modal" style="display:none;">'
        '<div class="keypoints-popup-content">'
        '<span class="keypoints-popup-close">&times;</span>'
        "<h2>{}</h2>{}"
        "</div>"
        "</div>",
        config.mode_class,
        config.button_style,
        config.button_color,
        config.title,
        config.title,
        _point_list(points, config),
    )


def _inline_block(points, config: EffectiveConfig):
    return format_html(
        '<div class="keypoints {}"><h2>{}</h2>{}</div>',
        config.mode_class,
        config.title,
        _point_list(points, config),
    )


def build_view(points, config: EffectiveConfig, content="") -> str:
    """Render the widget and place it relative to ``content``.

    ``content`` is trusted markup and is never escaped.
    """
    points = clean_points(points)
    block = _popup_block(points, config) if config.is_popup else _inline_block(points, config)
    content = mark_safe(content or "")
    if config.is_below:
        return content + block
    return block + content


def render(points, config: EffectiveConfig, surrounding_content="") -> str:
    """Full widget markup: the placed view inside the wrapper, followed by a float clear."""
    inner = build_view(points, config, surrounding_content)
    return format_html('<div class="{}">{}</div>{}', WRAPPER_MARKER, inner, mark_safe(CLEAR_FLOATS))
