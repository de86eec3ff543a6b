"""Main FastAPI application for Sudoku Solver."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import _get_solver_strategy, router


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Eagerly validate solver configuration so misconfiguration fails at startup."""
    strategy, error = _get_solver_strategy()
    if strategy is None:
        raise RuntimeError(f"Invalid solver configuration at startup: {error}")
    yield


app = FastAPI(
    title="Sudoku Solver API",
    description="API for solving Sudoku puzzles from JSON grids or puzzle lines",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Solver API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)
