from django.db import models


class ProductImage(models.Model):
    """Product gallery image; banners only read the thumbnail"""
    product = models.ForeignKey('Product', on_delete=models.CASCADE, related_name='images')
    image_url = models.CharField(max_length=500)
    thumbnail_url = models.CharField(max_length=500, blank=True, default='')
    is_thumbnail = models.BooleanField(default=False)
    order = models.IntegerField(default=0, help_text="Display order")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_images'
        ordering = ['order', 'created_at']
        indexes = [
            models.Index(fields=['product', 'order'], name='product_img_product_order_idx'),
        ]

    def __str__(self):
        return f"Image for {self.product.name}"
