# -*- coding: utf-8 -*-
"""
LocForge Interfaces Package

Interfaces shared by the pipeline and its external collaborators.
Using Protocol from typing allows structural subtyping (duck typing)
without requiring explicit inheritance.
"""

from interfaces.i_content import ITextComponent
from interfaces.i_plugin import ITranslationEngine, LOCFORGE_ENGINE_API_VERSION

__all__ = [
    'ITextComponent',
    'ITranslationEngine',
    'LOCFORGE_ENGINE_API_VERSION',
]
