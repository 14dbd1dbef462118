"""
version.py - CHANGEPASS
========================
Single source of truth for the version number.
Used by:
  - pyproject.toml (dynamic version)
  - the demo window title
  - log banners
"""

APP_NAME = "CHANGEPASS"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"
