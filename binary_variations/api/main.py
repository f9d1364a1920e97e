"""FastAPI application for the Binary Variations API."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from binary_variations.api.routes import generator_router
from binary_variations.config import get_settings

# Create FastAPI app
app = FastAPI(
    title="Binary Variations API",
    description="""
    Ordered binary variations of a set of items.

    ## Features

    - **Generation**: All non-empty subsets of the variations, in binary order
    - **Filtering**: Include/exclude single items or item combinations, with precedence
    - **Counting**: Expected (2^N - 1) and filtered combination counts
    - **Export**: Preview rows and CSV download with joined labels

    ## Workflow

    1. Use `/generator/calculate-count` to check how many combinations a request yields
    2. Use `/generator/preview` to preview the first rows
    3. Use `/generator/generate` or `/generator/download` for the full result
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(generator_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=get_settings().log_level)
    uvicorn.run(app, host="0.0.0.0", port=8000)
