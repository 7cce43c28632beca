import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from app.api import admin_routes, search_routes
from app.api.gallery_routes import admin_gallery_routes, gallery_routes
from app.api.menu_routes import admin_menu_item_routes, menu_routes
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.db import create_db_and_tables

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


# Create the FastAPI app
app = FastAPI(title="Coffee Shop API")

register_exception_handlers(app)

# ✅ Swagger Bearer token support for "Authorize" button
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Coffee Shop API",
        version="1.0.0",
        description="Bilingual menu and gallery content for the storefront and the admin panel.",
        routes=app.routes,
    )
    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT"
        }
    }
    for path, operations in openapi_schema["paths"].items():
        # login is how a token is obtained
        if not path.startswith("/api/admin") or path == "/api/admin/login":
            continue
        for operation in operations.values():
            operation["security"] = [{"BearerAuth": []}]
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi

# ✅ Allow the storefront and admin SPAs (CORS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
async def health():
    return {"status": "OK", "message": "Coffee Shop API is running"}


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()
    log.info("DB schema ready.")


# ✅ Admin surface
app.include_router(admin_routes.router)
app.include_router(admin_menu_item_routes.router)
app.include_router(admin_gallery_routes.router)

# ✅ Public surface
app.include_router(menu_routes.router)
app.include_router(gallery_routes.router)
app.include_router(search_routes.router)
