"""
BACKEND PACKAGE INITIALIZATION FILE

Flask REST API exposing the totp_core generator.
"""

from .app import create_app

__all__ = ['create_app']
