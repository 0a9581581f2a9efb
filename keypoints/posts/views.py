from django.utils.safestring import mark_safe
from django.views.generic import DetailView, ListView

from keypoints.posts.models import Post
from keypoints.summary.services import SINGULAR_PAGE, render_post_content


class PublishedPostMixin:
    model = Post

    def get_queryset(self):
        return super().get_queryset().filter(is_published=True)


class PostList(PublishedPostMixin, ListView):
    template_name = "posts/post_list.html"
    context_object_name = "posts"
    paginate_by = 20


class PostDetail(PublishedPostMixin, DetailView):
    template_name = "posts/post_detail.html"
    context_object_name = "post"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["rendered_content"] = mark_safe(render_post_content(self.object, SINGULAR_PAGE))
        return context
