"""
``[keypoints]`` shortcodes embedded in post bodies.

Supported forms::

    [keypoints]
    [keypoints view="popup" title='Quick read' list_type=ordered]
    [keypoints view="below"]<p>Wrapped content</p>[/keypoints]
    [[keypoints]]   (escaped, printed literally as [keypoints])
"""
import re

SHORTCODE_TAG = "keypoints"

SHORTCODE_RE = re.compile(
    r"\[(\[?)"  # 1: opening bracket of an escaped shortcode
    rf"({SHORTCODE_TAG})(?![\w-])"  # 2: tag name
    r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"  # 3: attributes
    r"(?:"
    r"(/)\]"  # 4: self-closing
    r"|\]"
    rf"(?:([^\[]*(?:\[(?!/{SHORTCODE_TAG}\])[^\[]*)*)\[/{SHORTCODE_TAG}\])?"  # 5: enclosed content
    r")"
    r"(\]?)"  # 6: closing bracket of an escaped shortcode
)

ATTR_RE = re.compile(
    r"([\w-]+)\s*=\s*\"([^\"]*)\"(?:\s|$)"
    r"|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"
    r"|([\w-]+)\s*=\s*([^\s'\"]+)(?:\s|$)"
)


def parse_attrs(text):
    """Parse ``name="value"`` pairs; names are lower-cased, positional values ignored."""
    attrs = {}
    for match in ATTR_RE.finditer(text or ""):
        if match.group(1):
            name, value = match.group(1), match.group(2)
        elif match.group(3):
            name, value = match.group(3), match.group(4)
        else:
            name, value = match.group(5), match.group(6)
        attrs[name.lower()] = value
    return attrs


def _is_escaped(match):
    return match.group(1) == "[" and match.group(6) == "]"


def has_shortcode(content):
    if not content:
        return False
    return any(not _is_escaped(match) for match in SHORTCODE_RE.finditer(content))


def expand_shortcodes(content, handler):
    """Replace every shortcode with ``handler(attrs, inner_content)``.

    ``inner_content`` is None for the self-closing form.
    """
    if not content or f"[{SHORTCODE_TAG}" not in content:
        return content or ""

    def _replace(match):
        if _is_escaped(match):
            return match.group(0)[1:-1]
        # an unpaired outer bracket stays in the text
        return match.group(1) + str(handler(parse_attrs(match.group(3)), match.group(5))) + match.group(6)

    return SHORTCODE_RE.sub(_replace, content)


def strip_shortcodes(content):
    """Remove shortcodes, keeping any enclosed content."""
    return expand_shortcodes(content, lambda attrs, inner_content: inner_content or "")
