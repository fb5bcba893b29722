import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AnalyticsEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('event_type', models.CharField(choices=[('page_view', 'Page view'), ('product_view', 'Product view'), ('product_click', 'Product click'), ('category_view', 'Category view'), ('category_click', 'Category click'), ('banner_impression', 'Banner impression'), ('banner_click', 'Banner click'), ('search', 'Search')], max_length=32)),
                ('entity_type', models.CharField(choices=[('product', 'Product'), ('category', 'Category'), ('banner', 'Banner'), ('page', 'Page')], max_length=16)),
                ('entity_id', models.CharField(blank=True, default='', max_length=64)),
                ('entity_slug', models.CharField(blank=True, default='', max_length=220)),
                ('entity_name', models.CharField(blank=True, default='', max_length=200)),
                ('session_id', models.CharField(blank=True, default='', max_length=64)),
                ('ip', models.GenericIPAddressField(blank=True, null=True)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'analytics_events',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['event_type', 'entity_type', 'created_at'], name='analytics_type_created_idx'),
                    models.Index(fields=['entity_type', 'entity_id'], name='analytics_entity_idx'),
                ],
            },
        ),
    ]
