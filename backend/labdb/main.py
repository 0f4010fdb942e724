"""
Point d'entrée de l'API labdb.
Démarrage : uvicorn labdb.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from labdb.database import engine
from labdb.routers import students
from labdb.tables import TableAccessError, make_students_table

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : s'assure que la table students existe au démarrage."""
    with engine.connect() as connection:
        table = make_students_table(connection)
        if table.create_table():
            logger.info("Table %s initialisée.", table.get_table_name())
        else:
            logger.info("Table %s déjà présente ou non créée.", table.get_table_name())
    yield


app = FastAPI(
    title="labdb API",
    description="Accès CRUD à la table students",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.include_router(students.router)


@app.exception_handler(TableAccessError)
async def table_access_error_handler(request: Request, exc: TableAccessError) -> JSONResponse:
    """Les erreurs base ne traversent jamais l'API avec leur détail brut."""
    logger.error("Erreur d'accès à la table : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "labdb API", "version": "0.1.0"}
