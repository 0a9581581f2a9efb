from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

from . import views

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="posts:list", permanent=False), name="home"),
    path("health/", views.health_check, name="health_check"),
    path("posts/", include("keypoints.posts.urls", namespace="posts")),
]

# Django Admin (conditionally include if admin app is installed)
if "django.contrib.admin" in settings.INSTALLED_APPS:
    urlpatterns.insert(0, path(settings.ADMIN_URL, admin.site.urls))
