"""
linecmp server - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from linecmp import __version__
from linecmp.routers import compare, config
from linecmp.services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Server] Starting linecmp server...")
    config_manager = ConfigManager.get_instance()
    print(f"[Server] ConfigManager initialized from {config_manager.config_file}")

    yield
    print("[Server] Shutting down linecmp server...")


app = FastAPI(
    title="linecmp",
    description="Find lines common to or different between text sources",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(compare.router, prefix="/api/compare", tags=["compare"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "linecmp"}


def run():
    """Serve the app on the configured host and port"""
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=server.get("port", 8000))


if __name__ == "__main__":
    run()
