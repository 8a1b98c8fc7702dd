"""Registry package for demo lookup."""

from .demo_registry import DemoRegistration, DemoRegistry, PatternCategory, get_demo_registry
from .demo_registration import register_all_demos

__all__ = [
    'DemoRegistration',
    'DemoRegistry',
    'PatternCategory',
    'get_demo_registry',
    'register_all_demos',
]
