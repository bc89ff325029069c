import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Import routers
from careerguide.routers import career_assessment, roadmap, activity, users
from careerguide.core.config import get_settings
from careerguide.core.logging_config import configure_logging
from careerguide.utils.utils import error_response
from mangum import Mangum

# Initialize settings
settings = get_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize Firebase on startup
@app.on_event("startup")
async def startup_event():
    if settings.uses_firestore:
        from careerguide.core.firebase import initialize_firebase
        initialize_firebase()
    else:
        logger.info("Storage backend: %s", settings.STORAGE_BACKEND)

@app.on_event("shutdown")
async def shutdown_event():
    if settings.uses_firestore:
        from careerguide.core.firebase import close_firestore_client
        close_firestore_client()

# Malformed bodies and query strings are client errors in the {success, error} envelope
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    field = ".".join(str(part) for part in errors[0]["loc"]) if errors else "request"
    return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid input: {field}")

# Include routers
app.include_router(career_assessment.router, prefix="/api/career-assessment", tags=["Career Assessment"])
app.include_router(roadmap.router, prefix="/api/roadmap", tags=["Roadmap"])
app.include_router(activity.router, prefix="/api/activity", tags=["Activity"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])

@app.get("/")
async def root():
    return {
        "message": "Welcome to CareerGuide API",
        "version": settings.VERSION,
        "description": settings.DESCRIPTION,
        "endpoints": {
            "career_assessment": "/api/career-assessment",
            "roadmap": "/api/roadmap",
            "activity": "/api/activity",
            "users": "/api/users",
            "docs": "/docs",
            "health": "/health"
        }
    }

handler = Mangum(app)

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "version": settings.VERSION,
        "storage_backend": settings.STORAGE_BACKEND,
        "debug": settings.DEBUG
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
