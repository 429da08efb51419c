# src/dubhub/services/__init__.py
"""Business logic services for the DubHub application.

Submodules are imported directly (``dubhub.services.verification`` and so on)
because the repositories depend on ``dubhub.services.errors``.
"""
