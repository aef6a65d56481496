"""
配置模块
"""

from .settings import SystemSettings
from .validator import ConfigValidator

__all__ = ['SystemSettings', 'ConfigValidator']
