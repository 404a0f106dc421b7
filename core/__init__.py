# -*- coding: utf-8 -*-
"""
LocForge Core Package

Key generation, dataset persistence, translation, reconciliation and
presentation services.
"""
