"""
FastAPI application entry point.

Wires the ApiKey authentication middleware, request tracing and the
consistent error envelope around a minimal set of routes.
"""

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from src.api.exception_handlers import register_exception_handlers
from src.api.middleware.auth import ApiKeyAuthMiddleware
from src.api.middleware.request_id import RequestIdMiddleware
from src.api.routes import health, whoami
from src.api.routes.health import API_VERSION
from src.shared.config import AuthSettings
from src.shared.logging import configure_logging


def custom_openapi(app: FastAPI):
    """Generate OpenAPI schema with the ApiKey security definition."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    openapi_schema["components"] = openapi_schema.get("components", {})
    openapi_schema["components"]["securitySchemes"] = {
        "ApiKeyAuth": {
            "type": "apiKey",
            "in": "header",
            "name": "Authorization",
            "description": "Pass your key as `ApiKey <token>`.",
        }
    }
    openapi_schema["security"] = [{"ApiKeyAuth": []}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def create_app(settings: AuthSettings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Service settings. Defaults to AuthSettings.from_env().
    """
    settings = settings or AuthSettings.from_env()
    configure_logging(settings)

    app = FastAPI(
        title="API Key Header Authentication",
        description="""
Endpoints (except `/health` and the documentation) require an API key in the
Authorization header:

```
Authorization: ApiKey your-api-key-here
```

Errors follow a consistent format:
```json
{"error": {"code": "error_code", "message": "Human-readable message"}}
```
""",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    app.openapi = lambda: custom_openapi(app)

    _configure_middleware(app, settings)

    register_exception_handlers(app)

    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(whoami.router, prefix="/api/v1", tags=["auth"])

    return app


def _configure_middleware(app: FastAPI, settings: AuthSettings) -> None:
    """
    Configure middleware for the application.

    Execution order (outermost first):
    1. RequestIdMiddleware - Assigns/preserves X-Request-ID
    2. ApiKeyAuthMiddleware - Extracts the API key (when enabled)
    """
    # First added = innermost
    if settings.auth_enabled:
        app.add_middleware(ApiKeyAuthMiddleware, exempt_paths=settings.exempt_paths)

    app.add_middleware(RequestIdMiddleware)


app = create_app()
