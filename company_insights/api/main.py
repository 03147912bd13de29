"""FastAPI application setup."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from company_insights import __version__
from company_insights.store import CompanyStore
from .routes import router

# Create FastAPI app
app = FastAPI(
    title="Company Insights",
    description="Deep-research startups and analyze company batches",
    version=__version__,
)

# Companies remembered between requests, in memory only
app.state.store = CompanyStore()

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


# Include API routes
app.include_router(router, prefix="/api")
