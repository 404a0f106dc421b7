# -*- coding: utf-8 -*-
"""
LocForge Controllers Package

Controllers hold session state and pass operator actions through to the
pipeline components.
"""

from controllers.localization_controller import LocalizationController

__all__ = [
    'LocalizationController',
]
