# API Routes
"""
API route modules.
"""

from src.api.routes import health, whoami

__all__ = ["health", "whoami"]
