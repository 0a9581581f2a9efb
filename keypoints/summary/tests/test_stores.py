from unittest import mock

import pytest

from keypoints.posts.tests.factories import PostFactory
from keypoints.summary import stores


@pytest.mark.django_db
class TestPoints:
    def test_points_in_stored_order(self):
        post = PostFactory(key_points=["b", "a"])
        assert stores.get_points(post.pk) == ["b", "a"]

    def test_numeric_string_id(self):
        post = PostFactory(key_points=["a"])
        assert stores.get_points(str(post.pk)) == ["a"]

    @pytest.mark.parametrize("item_id", [None, "", "abc", 999999, True])
    def test_unknown_item_is_empty(self, item_id):
        assert stores.get_points(item_id) == []

    def test_non_list_value_is_empty(self):
        post = PostFactory(key_points={"a": "b"})
        assert stores.get_points(post.pk) == []


@pytest.mark.django_db
class TestGlobalSettings:
    def test_missing_option_returns_default(self):
        assert stores.get_global_setting("view", "above") == "above"
        assert stores.get_global_setting("view") == ""

    def test_stored_option(self, display_options):
        display_options(view="below", mode="dark")
        assert stores.get_global_setting("view", "above") == "below"
        assert stores.get_global_settings() == {
            "view": "below",
            "mode": "dark",
            "title": "",
            "button_style": "",
            "button_color": "",
            "list_type": "",
        }


@pytest.mark.django_db
class TestItemOverrides:
    def test_flag(self):
        assert stores.get_item_override_flag(PostFactory(override_settings=True).pk) is True
        assert stores.get_item_override_flag(PostFactory().pk) is False
        assert stores.get_item_override_flag(None) is False

    def test_single_override(self):
        post = PostFactory(display_overrides={"view": "popup"})
        assert stores.get_item_override(post.pk, "view") == "popup"
        assert stores.get_item_override(post.pk, "mode") is None
        assert stores.get_item_override(999999, "view") is None

    def test_overrides_ignored_without_flag(self):
        post = PostFactory(override_settings=False, display_overrides={"view": "popup"})
        assert stores.get_item_overrides(post.pk) == {}

    def test_overrides_with_flag(self):
        post = PostFactory(override_settings=True, display_overrides={"view": "popup", "unknown": "x"})
        overrides = stores.get_item_overrides(post.pk)
        assert overrides["view"] == "popup"
        assert overrides["mode"] is None
        assert "unknown" not in overrides

    def test_overrides_read_through_item_lookups(self):
        post = PostFactory(override_settings=True, display_overrides={"mode": "dark"})
        with (
            mock.patch(
                "keypoints.summary.stores.get_item_override_flag", wraps=stores.get_item_override_flag
            ) as get_flag,
            mock.patch("keypoints.summary.stores.get_item_override", wraps=stores.get_item_override) as get_override,
        ):
            overrides = stores.get_item_overrides(post.pk)

        get_flag.assert_called_once_with(post.pk)
        assert get_override.call_count == 6
        get_override.assert_any_call(post.pk, "mode")
        assert overrides["mode"] == "dark"

    def test_flag_off_skips_value_lookups(self):
        post = PostFactory(override_settings=False, display_overrides={"mode": "dark"})
        with mock.patch("keypoints.summary.stores.get_item_override") as get_override:
            assert stores.get_item_overrides(post.pk) == {}
        get_override.assert_not_called()
