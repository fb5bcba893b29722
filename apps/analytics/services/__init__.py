"""
Analytics services module.
"""
from .analytics_service import AnalyticsService, period_start

__all__ = [
    'AnalyticsService',
    'period_start',
]
