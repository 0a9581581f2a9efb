from factory import Faker, LazyFunction
from factory.django import DjangoModelFactory

from keypoints.posts.models import Post


class PostFactory(DjangoModelFactory):
    title = Faker("sentence", nb_words=4)
    content = Faker("paragraph")
    is_published = True
    key_points = LazyFunction(list)
    override_settings = False
    display_overrides = LazyFunction(dict)

    class Meta:
        model = Post
