from django import forms
from django.contrib import admin, messages
from django.utils import timezone
from django.utils.html import format_html

from .models import Banner
from .services import BannerActivationError, BannerService, activation_violations, merge_banner_fields
from .services.activation_gate import BANNER_FIELDS


class BannerAdminForm(forms.ModelForm):
    """Change form that runs the activation gate before anything is saved"""

    class Meta:
        model = Banner
        fields = '__all__'

    def clean(self):
        cleaned_data = super().clean()
        for name in ('content', 'image'):
            if name in cleaned_data and cleaned_data[name] is None:
                cleaned_data[name] = {}

        # self.instance still holds the stored values until _post_clean
        existing = self.instance if self.instance.pk else None
        patch = {name: value for name, value in cleaned_data.items() if name in BANNER_FIELDS}
        try:
            merged = merge_banner_fields(existing, patch)
        except (TypeError, ValueError):
            self.add_error('content', 'Content does not match the content type')
            return cleaned_data

        if cleaned_data.get('is_active'):
            violations = activation_violations(merged, timezone.now())
            if violations:
                raise forms.ValidationError(violations)
        return cleaned_data


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    form = BannerAdminForm
    list_display = [
        'id', 'image_preview', 'name', 'content_type', 'source_type', 'order',
        'is_active', 'start_date', 'end_date', 'clicks', 'impressions'
    ]
    list_filter = ['is_active', 'content_type', 'source_type']
    search_fields = ['name']
    list_editable = ['order']
    readonly_fields = ['image_preview', 'clicks', 'impressions', 'created_at', 'updated_at']
    ordering = ['order', 'id']

    fieldsets = (
        ('Banner', {
            'fields': ('name', 'content_type', 'source_type', 'content')
        }),
        ('Images', {
            'fields': ('image_preview', 'image', 'mobile_image')
        }),
        ('Schedule', {
            'fields': ('order', 'is_active', 'start_date', 'end_date')
        }),
        ('Counters', {
            'fields': ('clicks', 'impressions', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['activate_banners', 'deactivate_banners']

    def image_preview(self, obj):
        if obj and obj.image_url:
            return format_html(
                '<img src="{}" style="max-width: 120px; max-height: 60px; object-fit: cover;" />',
                obj.image_url
            )
        return format_html('<span style="color: #999;">No image</span>')
    image_preview.short_description = 'Image'

    def activate_banners(self, request, queryset):
        """Activate selected banners; ones failing validation are reported and left off"""
        now = timezone.now()
        activated = 0
        for banner in queryset:
            try:
                BannerService.patch_banner(banner, {'is_active': True}, now)
                activated += 1
            except BannerActivationError as e:
                self.message_user(
                    request, f"{banner}: {'; '.join(e.messages)}", level=messages.WARNING
                )
        self.message_user(request, f'Activated {activated} banner(s)')
    activate_banners.short_description = 'Activate selected banners'

    def deactivate_banners(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'Deactivated {count} banner(s)')
    deactivate_banners.short_description = 'Deactivate selected banners'

    def save_model(self, request, obj, form, change):
        """Save through BannerService so CTA derivation and price sync run"""
        data = {name: value for name, value in form.cleaned_data.items() if name in BANNER_FIELDS}
        now = timezone.now()
        if change:
            banner = BannerService.update_banner(Banner.objects.get(pk=obj.pk), data, now)
        else:
            banner = BannerService.create_banner(data, now)
        obj.pk = banner.pk
        obj.refresh_from_db()
