from django.contrib import admin
from django.utils.html import format_html
from .models import Category, Product, ProductImage
from .services import ProductPriceService


class ProductImageInline(admin.TabularInline):
    model = ProductImage
    extra = 1
    fields = ['image_preview', 'image_url', 'thumbnail_url', 'is_thumbnail', 'order']
    readonly_fields = ['image_preview']

    def image_preview(self, obj):
        """Display image preview"""
        if obj and obj.image_url:
            return format_html(
                '<img src="{}" style="max-width: 150px; max-height: 150px; object-fit: contain;" />',
                obj.thumbnail_url or obj.image_url
            )
        return format_html('<span style="color: #999;">No image</span>')
    image_preview.short_description = 'Preview'


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'parent', 'is_active', 'created_at']
    list_filter = ['is_active', 'parent']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    ordering = ['name']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        'id', 'name', 'retail_price', 'discount', 'effective_price',
        'wholesale_price', 'is_active', 'create_time'
    ]
    list_filter = ['is_active', 'category', 'create_time']
    search_fields = ['id', 'name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ['id', 'effective_price', 'create_time', 'update_time']
    ordering = ['-create_time']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name', 'slug', 'description', 'category', 'is_active')
        }),
        ('Pricing', {
            'fields': ('retail_price', 'discount', 'effective_price', 'wholesale_price')
        }),
        ('Timestamps', {
            'fields': ('create_time', 'update_time'),
            'classes': ('collapse',)
        }),
    )

    inlines = [ProductImageInline]

    actions = ['recalculate_prices', 'clear_discount']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('category')

    def recalculate_prices(self, request, queryset):
        """Re-derive effective and wholesale prices from the stored discount"""
        updated = 0
        for product in queryset:
            if ProductPriceService.sync_product_discount(product.pk, product.discount):
                updated += 1
        self.message_user(request, f'{updated} products repriced.')
    recalculate_prices.short_description = 'Recalculate prices from discount'

    def clear_discount(self, request, queryset):
        """Drop the discount and reset effective price to retail"""
        updated = 0
        for product in queryset:
            if ProductPriceService.sync_product_discount(product.pk, 0):
                updated += 1
        self.message_user(request, f'{updated} products had their discount removed.')
    clear_discount.short_description = 'Remove discount'
