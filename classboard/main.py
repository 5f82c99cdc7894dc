# /classboard/main.py

import logging

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# --- Application-specific Imports ---
from .core.config import CORS_ALLOW_ORIGINS, LOG_FORMAT, LOG_LEVEL
from .routers import reports_router

# --- Logging ---
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Classboard Backend API",
    description="Read-only reporting endpoints for the classroom dashboard: gradebook trees and behavior leaderboards.",
    version="1.0.0",
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(reports_router.router, prefix="/api/reports", tags=["Reports"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Classboard Backend is running!", "version": app.version}
