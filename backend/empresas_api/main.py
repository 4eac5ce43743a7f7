import logging

from fastapi import Depends, FastAPI
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from empresas_api.core.errors import add_error_handlers
from empresas_api.core.logging_config import setup_logging
from empresas_api.core.security import docs_protected, require_auth, require_docs_auth
from empresas_api.core.settings import settings

from empresas_api.api.auth import router as auth_router
from empresas_api.api.company import router as company_router

VERSION = "1.0.0"

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Cadastro e consulta de empresas por CNPJ",
    version=VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

add_error_handlers(app)

# Login sempre exposto; /empresas exige JWT quando AUTH_ENABLED=true
app.include_router(auth_router)
app.include_router(company_router, dependencies=[Depends(require_auth)])

logger.info("%s %s iniciada (env=%s, auth=%s)", settings.APP_NAME, VERSION, settings.ENV, settings.AUTH_ENABLED)


@app.get("/health")
def health():
    return {
        "ok": True,
        "service": "empresas-api",
        "env": settings.ENV,
        "version": VERSION,
        "auth_enabled": bool(settings.AUTH_ENABLED),
        "docs_protected": docs_protected(),
    }


# Docs/OpenAPI: sempre existem; quando protegidas exigem JWT
@app.get("/openapi.json", include_in_schema=False, dependencies=[Depends(require_docs_auth)])
def openapi_json():
    schema = get_openapi(title=app.title, version=app.version, description=app.description, routes=app.routes)
    return JSONResponse(schema)


@app.get("/docs", include_in_schema=False, dependencies=[Depends(require_docs_auth)])
def swagger_docs():
    return get_swagger_ui_html(openapi_url="/openapi.json", title=f"{app.title} - Docs")


@app.get("/redoc", include_in_schema=False, dependencies=[Depends(require_docs_auth)])
def redoc_docs():
    return get_redoc_html(openapi_url="/openapi.json", title=f"{app.title} - ReDoc")
