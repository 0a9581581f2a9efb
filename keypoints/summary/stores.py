"""Read-only accessors for stored key points and display options.

Unknown items and malformed stored values read as empty; nothing here raises
for missing data.
"""
import logging

from keypoints.posts.models import Post
from keypoints.summary.models import DisplayOption, OptionKey

logger = logging.getLogger(__name__)


def _coerce_id(item_id):
    if item_id is None or isinstance(item_id, bool):
        return None
    try:
        return int(str(item_id).strip())
    except ValueError:
        return None


def _get_post(item_id):
    pk = _coerce_id(item_id)
    if pk is None:
        return None
    post = Post.objects.filter(pk=pk).first()
    if post is None:
        logger.debug("No post found for key points lookup: %s", item_id)
    return post


def get_points(item_id) -> list:
    post = _get_post(item_id)
    if post is None or not isinstance(post.key_points, list):
        return []
    return post.key_points


def get_global_setting(key, default="") -> str:
    option = DisplayOption.objects.filter(name=key).first()
    if option is None:
        return default
    return option.value


def get_global_settings() -> dict:
    return {key: get_global_setting(key) for key in OptionKey.values}


def get_item_override_flag(item_id) -> bool:
    post = _get_post(item_id)
    return bool(post and post.override_settings)


def get_item_override(item_id, key):
    post = _get_post(item_id)
    if post is None or not isinstance(post.display_overrides, dict):
        return None
    return post.display_overrides.get(key)


def get_item_overrides(item_id) -> dict:
    """All override values for an item, or nothing unless its override flag is set."""
    if not get_item_override_flag(item_id):
        return {}
    return {key: get_item_override(item_id, key) for key in OptionKey.values}
