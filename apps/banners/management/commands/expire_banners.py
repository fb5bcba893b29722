from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.banners.models import Banner
from apps.banners.services import BannerAggregator


class Command(BaseCommand):
    help = 'Deactivate hero banners whose end date has passed'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List expired banners without deactivating them',
        )

    def handle(self, *args, **options):
        now = timezone.now()

        if options.get('dry_run'):
            expired = Banner.objects.expired(now).order_by('end_date')
            for banner in expired:
                self.stdout.write(f'Would deactivate banner {banner.id}: {banner.name} (ended {banner.end_date})')
            self.stdout.write(
                self.style.SUCCESS(f'Dry run complete. {expired.count()} banner(s) expired')
            )
            return

        self.stdout.write('Sweeping expired hero banners...')
        count = BannerAggregator.sweep_expired(now)
        self.stdout.write(
            self.style.SUCCESS(f'Banner expiry complete. Deactivated: {count}')
        )
