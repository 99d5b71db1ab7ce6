# /classroom/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Application-specific Imports ---
from .core.config import Settings, get_settings
from .core.logging_config import setup_logging
from .db.database import Database
from .routers import (
    auth_router,
    classes_router,
    enrollments_router,
    attendance_router,
    assessments_router,
    grades_router,
    students_router,
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Builds the application. The Database (engine + session factory) is created
    here, once per process, and handed to request handlers via `app.state`.
    Building it opens no connection; logging is configured and tables are
    created only when the app starts up.
    """
    settings = settings or get_settings()
    database = database or Database(settings.DATABASE_URL)

    # --- Application Lifecycle Management ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL)
        if settings.AUTO_CREATE_TABLES:
            database.create_all()
        logger.info("Database ready at %s", database.engine.url.render_as_string(hide_password=True))
        yield
        database.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Classes, enrollments, attendance and grades for teachers and students.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # --- Middleware Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed or missing fields are a plain 400 across the API.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # --- API Router Inclusion ---
    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
    app.include_router(enrollments_router.router, prefix="/api/enrollments", tags=["Enrollments"])
    app.include_router(attendance_router.router, prefix="/api/attendance", tags=["Attendance"])
    app.include_router(assessments_router.router, prefix="/api/assessments", tags=["Assessments"])
    app.include_router(grades_router.router, prefix="/api/grades", tags=["Grades"])
    app.include_router(students_router.router, prefix="/api/students", tags=["Students"])

    # --- Root / Health Check Endpoint ---
    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the API is online."""
        return {"status": "Classroom Tracker is running!", "version": app.version}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("classroom.main:app", host="0.0.0.0", port=8000, reload=True)
