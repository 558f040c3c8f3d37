from django.core.management.base import BaseCommand, CommandError

from recipes.exceptions import CookifyError
from recipes.firebase_admin_client import require_firestore_client
from recipes.services.moderation import ModerationService


class Command(BaseCommand):
    """
    Management command that publishes a pending recipe submission.

    Moves the document from `recipes_pending` into `recipes` with status
    `approved`. This is the only moderation transition; there is no way
    back to pending.
    """

    help = 'Approves a pending recipe submission and publishes it'

    def add_arguments(self, parser):
        parser.add_argument('submission_id', help='Document id in recipes_pending')
        parser.add_argument('--comment', default='', help='Optional moderator comment')

    def handle(self, *args, **options):
        try:
            service = ModerationService(require_firestore_client())
            recipe = service.approve(options['submission_id'], moderator_comment=options['comment'])
        except CookifyError as e:
            raise CommandError(e.message)

        self.stdout.write(self.style.SUCCESS(f"Approved \"{recipe.title}\" ({recipe.id})."))
