import pytest

from keypoints.posts.models import Post
from keypoints.posts.tests.factories import PostFactory
from keypoints.summary.tests.factories import DisplayOptionFactory


@pytest.fixture
def post(db) -> Post:
    return PostFactory(key_points=["Fast", "", "Reliable"])


@pytest.fixture
def empty_post(db) -> Post:
    return PostFactory(key_points=[])


@pytest.fixture
def display_options(db):
    """Let tests set global display options by name."""

    def _set(**values):
        return [DisplayOptionFactory(name=name, value=value) for name, value in values.items()]

    return _set
