"""FastAPI application for the fee rule engine."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import Depends, FastAPI

from swapfee.api.endpoints import get_engine, router, set_engine
from swapfee.config import RegistryConfig, ServiceConfig
from swapfee.engine import RuleEngine
from swapfee.validation import load_fee_config

logger = structlog.get_logger()

SERVICE_CONFIG = ServiceConfig.from_env()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Build the engine from SWAPFEE_CONFIG_PATH when it is set."""
    if SERVICE_CONFIG.config_path:
        engine = RuleEngine(
            load_fee_config(SERVICE_CONFIG.config_path),
            registry_config=RegistryConfig.from_env(),
        )
        set_engine(engine)
    else:
        logger.warning("fee_config_path_not_set", env_var="SWAPFEE_CONFIG_PATH")
    yield
    set_engine(None)


app = FastAPI(
    title="Swap Fee Rule Engine",
    description="Fee decisions for cross-chain token swaps",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health")
async def health(engine: RuleEngine = Depends(get_engine)) -> dict[str, object]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "registry_ready": engine.registry.is_ready(),
        "rule_count": len(engine.rules),
    }


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - SWAPFEE_HOST: Host to bind to (default: 0.0.0.0)
    - SWAPFEE_PORT: Port to bind to (default: 8000)
    - SWAPFEE_DEBUG: Enable debug/reload mode (default: false)
    - SWAPFEE_CONFIG_PATH: Fee configuration JSON file
    - SWAPFEE_TOKEN_REGISTRY_URL / SWAPFEE_TOKEN_CACHE_TTL_SECONDS /
      SWAPFEE_TOKEN_REGISTRY_TIMEOUT_SECONDS: token registry settings
    """
    uvicorn.run(
        "swapfee.api.main:app",
        host=SERVICE_CONFIG.host,
        port=SERVICE_CONFIG.port,
        reload=SERVICE_CONFIG.debug,
    )


if __name__ == "__main__":
    run()
