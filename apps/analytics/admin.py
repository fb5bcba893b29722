from django.contrib import admin
from .models import AnalyticsEvent


@admin.register(AnalyticsEvent)
class AnalyticsEventAdmin(admin.ModelAdmin):
    list_display = ['id', 'event_type', 'entity_type', 'entity_id', 'entity_name', 'created_at']
    list_filter = ['event_type', 'entity_type', 'created_at']
    search_fields = ['entity_id', 'entity_slug', 'entity_name', 'session_id']
    readonly_fields = [f.name for f in AnalyticsEvent._meta.fields]
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False
