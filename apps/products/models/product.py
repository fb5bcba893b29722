from django.core.validators import MaxValueValidator
from django.db import models


class Product(models.Model):
    """Catalog product with the retail/discount/wholesale price block"""
    # Core fields
    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=220, unique=True)
    description = models.TextField(blank=True, default='')
    category = models.ForeignKey('Category', on_delete=models.SET_NULL, null=True, blank=True, related_name='products')

    # Prices, in whole currency units
    retail_price = models.DecimalField(max_digits=12, decimal_places=2, help_text="List price before any discount")
    wholesale_price = models.DecimalField(max_digits=12, decimal_places=2, default=0, help_text="0 means not set")
    discount = models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(100)], help_text="Percent off retail")
    effective_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True, help_text="Retail after discount")

    is_active = models.BooleanField(default=True)

    create_time = models.DateTimeField(auto_now_add=True)
    update_time = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['is_active', 'create_time'], name='products_active_created_idx'),
            models.Index(fields=['is_active', 'discount'], name='products_active_discount_idx'),
        ]

    def __str__(self):
        return f"{self.name} (id: {self.id})"

    @property
    def thumbnail(self):
        """Thumbnail image if one is flagged, else the first image"""
        images = list(self.images.all())
        for image in images:
            if image.is_thumbnail:
                return image
        return images[0] if images else None
