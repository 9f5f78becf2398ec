"""Template helper functions.

Helpers are plain functions grouped by concern. They are exposed to templates
through the registries built in ``forge_ui.registry``, never imported by
templates directly.
"""
