"""
TipSplit Backend - FastAPI Application

Settings administration (phases, positions, projects, roles) and saved
bill-split calculations over MongoDB.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from app.branding import APP_NAME, HEADER
from app.config import get_settings
from app.database.connections import close_connections, get_database
from app.database.indexes import create_indexes
from app.routers import auth, calculations, health, phases, positions, projects, roles

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("tipsplit")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize the database connection (a malformed service-account
      payload aborts startup)
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    logger.info(f"Starting up {APP_NAME} Backend...")

    db = await get_database()
    try:
        await create_indexes(db)
        logger.info("Database indexes created")
    except PyMongoError as e:
        logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info(f"Shutting down {APP_NAME} Backend...")
    await close_connections()
    logger.info("Database connections closed")


# Create FastAPI application
app = FastAPI(
    title=f"{APP_NAME} API",
    description="""
## TipSplit Settings API

### Features
- **Authentication**: JWT-based auth with role permissions
- **Settings**: Phases, employee positions, projects and roles
- **Calculations**: Bill-split calculator with saved bills

### Authentication
All protected endpoints require a JWT token passed as a query parameter:
```
GET /settings/roles?token=your_jwt_token
```

Obtain a token via `POST /auth/login`.

### Settings pages
`GET /settings/{phases,positions,projects,roles}` returns a page payload
with a `state`, the `items`, and an `error` when the read failed.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:8501",  # Streamlit default
        "http://streamlit_frontend:8501",  # Docker network
        "http://localhost:3000",  # Development
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(phases.router)
app.include_router(positions.router)
app.include_router(projects.router)
app.include_router(roles.router)
app.include_router(calculations.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with branding and API information."""
    return {
        "name": f"{APP_NAME} API",
        "version": "0.1.0",
        "header": HEADER,
        "docs": "/docs",
        "health": "/health",
    }
