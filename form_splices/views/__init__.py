"""View rendering module for HTML templates.

This module handles all HTML/template rendering logic, separate from routers.
Views bind form views into the template context and render Jinja2 templates
that use the df_* form tags.
"""
