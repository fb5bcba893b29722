from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Banner',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, default='', help_text='Internal name, shown in admin', max_length=100)),
                ('content_type', models.CharField(choices=[('custom', 'Custom'), ('product', 'Product'), ('category', 'Category'), ('trending', 'Trending'), ('new_arrivals', 'New arrivals'), ('offer', 'Offer')], default='custom', max_length=20)),
                ('source_type', models.CharField(choices=[('manual', 'Manual'), ('auto', 'Auto')], default='manual', max_length=10)),
                ('content', models.JSONField(blank=True, default=dict, help_text='Content fields for the content type')),
                ('image', models.JSONField(blank=True, default=dict, help_text='{id, name, url, thumbnail_url, alt}')),
                ('mobile_image', models.JSONField(blank=True, null=True)),
                ('order', models.IntegerField(default=0, help_text='Display order, lower first')),
                ('is_active', models.BooleanField(default=False)),
                ('start_date', models.DateTimeField(blank=True, null=True)),
                ('end_date', models.DateTimeField(blank=True, null=True)),
                ('clicks', models.PositiveIntegerField(default=0)),
                ('impressions', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'hero_banners',
                'ordering': ['order', 'id'],
                'indexes': [
                    models.Index(fields=['is_active', 'order'], name='hero_banner_active_order_idx'),
                    models.Index(fields=['is_active', 'start_date', 'end_date'], name='hero_banner_schedule_idx'),
                ],
            },
        ),
    ]
