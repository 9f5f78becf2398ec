"""View rendering module for HTML templates and mails.

This module handles all template rendering logic, separate from the routers.
Views install the helper registries into Jinja2 environments and render
view models into pages, fragments and mail messages.
"""
