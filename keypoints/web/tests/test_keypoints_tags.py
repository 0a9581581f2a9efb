import pytest
from django.template import Context, Template

from keypoints.posts.tests.factories import PostFactory


def _render(source, **context):
    return Template("{% load keypoints_tags %}" + source).render(Context(context))


@pytest.mark.django_db
class TestKeyPointsTag:
    def test_current_post(self, post):
        html = _render('{% key_points title="Summary" %}', post=post)
        assert '<div class="keypoints-wrap"><div class="keypoints light"><h2>Summary</h2>' in html

    def test_explicit_id(self, post, empty_post):
        html = _render("{% key_points id=other list_type='ordered' %}", post=empty_post, other=post.pk)
        assert "<ol><li>Fast</li><li>Reliable</li></ol>" in html

    def test_fallback(self, empty_post):
        html = _render("{% key_points %}", post=empty_post)
        assert html == "<p>No key points have been set for this post.</p>"

    def test_without_post(self):
        assert _render("{% key_points %}") == "<p>No key points have been set for this post.</p>"


@pytest.mark.django_db
class TestWithKeyPointsFilter:
    def test_appends(self, post):
        html = _render("{{ content|with_key_points:post }}", content="<p>Body</p>", post=post)
        assert html.endswith("<p>Body</p>")
        assert html.count("keypoints-wrap") == 1

    def test_no_points(self, empty_post):
        html = _render("{{ content|with_key_points:post }}", content="<p>Body</p>", post=empty_post)
        assert html == "<p>Body</p>"


@pytest.mark.django_db
class TestKeypointsAssetsTag:
    def test_loaded_with_points(self, post):
        html = _render("{% keypoints_assets post %}", post=post)
        assert '<link rel="stylesheet" href="/static/keypoints/css/keypoints.css">' in html
        assert '<script src="/static/keypoints/js/keypoints.js" defer></script>' in html

    def test_loaded_with_shortcode(self):
        post = PostFactory(key_points=[], content="[keypoints]")
        assert "keypoints.css" in _render("{% keypoints_assets post %}", post=post)

    def test_not_loaded(self, empty_post):
        assert _render("{% keypoints_assets post %}", post=empty_post) == ""
