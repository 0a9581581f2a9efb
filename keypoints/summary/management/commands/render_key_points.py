from django.core.management import BaseCommand, CommandError

from keypoints.posts.models import Post
from keypoints.summary.models import OptionKey
from keypoints.summary.services import render_manual


class Command(BaseCommand):
    help = "Print the key points widget markup for a post."

    def add_arguments(self, parser):
        parser.add_argument("post_id", type=int)
        for key in OptionKey.values:
            parser.add_argument(f"--{key.replace('_', '-')}", dest=key, default="", help=f"Override the {key} option.")

    def handle(self, *args, **options):
        post_id = options["post_id"]
        if not Post.objects.filter(pk=post_id).exists():
            raise CommandError(f"Post {post_id} does not exist.")

        attrs = {key: options[key] for key in OptionKey.values}
        self.stdout.write(str(render_manual(item_id=post_id, **attrs)))
