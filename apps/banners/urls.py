from django.urls import path
from . import views

urlpatterns = [
    # Storefront
    path('hero-banners/', views.HeroBannerListView.as_view(), name='hero-banner-list'),
    path('hero-banners/<int:pk>/click/', views.HeroBannerClickView.as_view(), name='hero-banner-click'),

    # Admin
    path('admin/hero-banners/', views.AdminBannerListView.as_view(), name='admin-hero-banner-list'),
    path('admin/hero-banners/validate/', views.BannerValidateView.as_view(), name='admin-hero-banner-validate'),
    path('admin/hero-banners/cta-preview/', views.CtaPreviewView.as_view(), name='admin-hero-banner-cta-preview'),
    path('admin/hero-banners/reorder/', views.BannerReorderView.as_view(), name='admin-hero-banner-reorder'),
    path('admin/hero-banners/<int:pk>/', views.AdminBannerDetailView.as_view(), name='admin-hero-banner-detail'),
]
