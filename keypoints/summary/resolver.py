"""
Display option resolution for the key points widget.

Options come from an ordered list of tiers (highest precedence first). Each
tier is a plain mapping of option key to value; the first non-empty value
wins and anything left unresolved falls back to ``DEFAULTS``.
"""
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields

from keypoints.summary.models import OptionKey

DEFAULTS = {
    OptionKey.VIEW.value: "above",
    OptionKey.MODE.value: "light",
    OptionKey.TITLE.value: "Key Takeaways",
    OptionKey.BUTTON_STYLE.value: "flat",
    OptionKey.BUTTON_COLOR.value: "#0073aa",
    OptionKey.LIST_TYPE.value: "unordered",
}


@dataclass(frozen=True)
class EffectiveConfig:
    view: str
    mode: str
    title: str
    button_style: str
    button_color: str
    list_type: str

    @property
    def is_popup(self):
        return self.view == "popup"

    @property
    def is_below(self):
        return self.view == "below"

    @property
    def is_ordered(self):
        return self.list_type == "ordered"

    @property
    def mode_class(self):
        return "dark" if self.mode == "dark" else "light"


def _is_empty(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return not value


def call_site_tier(**attrs) -> dict:
    """Keep only the call-site attributes that were actually given."""
    return {key: value for key, value in attrs.items() if key in DEFAULTS and not _is_empty(value)}


def resolve(tiers: Sequence[Mapping]) -> EffectiveConfig:
    resolved = {}
    for field in fields(EffectiveConfig):
        for tier in tiers:
            value = tier.get(field.name)
            if not _is_empty(value):
                resolved[field.name] = str(value)
                break
        else:
            resolved[field.name] = DEFAULTS[field.name]
    return EffectiveConfig(**resolved)
