"""Shared pytest configuration and fixtures."""
from __future__ import annotations

import os

# Provide env vars before any textdetect module is imported
os.environ.setdefault("OCR_PROVIDER", "mock")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
