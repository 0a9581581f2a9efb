import pytest
from django.test import Client
from django.urls import reverse

from keypoints.posts.models import Post
from keypoints.posts.tests.factories import PostFactory


@pytest.mark.django_db
class TestPostDetail:
    def test_widget_rendered_once(self, client: Client, post: Post):
        post.content = "<p>Body</p>"
        post.save()
        response = client.get(post.get_absolute_url())

        assert response.status_code == 200
        content = response.content.decode("utf-8")
        assert content.count('class="keypoints-wrap"') == 1
        assert "<li>Fast</li><li>Reliable</li>" in content
        assert "keypoints/css/keypoints.css" in content

    def test_below_setting(self, client: Client, post: Post, display_options):
        display_options(view="below")
        post.content = "<p>Body</p>"
        post.save()
        content = client.get(post.get_absolute_url()).content.decode("utf-8")
        assert content.index("<p>Body</p>") < content.index('class="keypoints-wrap"')

    def test_no_points_no_widget_no_assets(self, client: Client, empty_post: Post):
        content = client.get(empty_post.get_absolute_url()).content.decode("utf-8")
        assert "keypoints-wrap" not in content
        assert "keypoints.css" not in content

    def test_shortcode_in_body(self, client: Client, post: Post):
        post.content = '<p>Intro</p>[keypoints view="popup" title="Quick read"]'
        post.save()
        content = client.get(post.get_absolute_url()).content.decode("utf-8")
        assert content.count('class="keypoints-wrap"') == 1
        assert ">Quick read</button>" in content
        assert "[keypoints" not in content

    def test_unpublished_is_404(self, client: Client):
        post = PostFactory(is_published=False, key_points=["a"])
        assert client.get(post.get_absolute_url()).status_code == 404


@pytest.mark.django_db
class TestPostList:
    def test_listing_never_shows_widget(self, client: Client, post: Post):
        post.content = "<p>Body</p>[keypoints]"
        post.save()
        response = client.get(reverse("posts:list"))

        assert response.status_code == 200
        content = response.content.decode("utf-8")
        assert post.title in content
        assert "keypoints-wrap" not in content
        assert "keypoints.css" not in content
        assert "[keypoints" not in content

    def test_unpublished_hidden(self, client: Client):
        post = PostFactory(is_published=False)
        content = client.get(reverse("posts:list")).content.decode("utf-8")
        assert post.title not in content
