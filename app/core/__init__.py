"""
Core application wiring: settings, logging and dependencies
"""

from .config import settings, Settings
from dataset.logging_config import setup_logging
from .network import get_network, get_search_service

__all__ = [
    'settings',
    'Settings',
    'setup_logging',
    'get_network',
    'get_search_service'
]
