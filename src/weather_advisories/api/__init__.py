"""FastAPI application and routes.

This module provides the REST API for the weather advisories service.

## API Structure

- /health - Health check
- /api/conditions/evaluate - Evaluate a posted snapshot
- /api/conditions/mock - Evaluate the mock fallback snapshot
- /api/conditions/categories - Card categories for preference screens

The API is stateless: preferences travel with each request or come from
the server configuration.
"""

from weather_advisories.api.app import create_app

__all__ = ["create_app"]
