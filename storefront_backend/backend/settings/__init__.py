# backend/settings/__init__.py
"""
PATH: backend/settings/__init__.py

Settings package for the storefront backend. Nothing is loaded here.

Select a concrete module with DJANGO_SETTINGS_MODULE:
- backend.settings.dev   (local development, tests)
- backend.settings.prod  (production)
"""
