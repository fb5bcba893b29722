"""
Analytics models module.
"""
from .event import AnalyticsEvent

__all__ = [
    'AnalyticsEvent',
]
