import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contract_api.api.router import api_router
from contract_api.core.config import settings
from contract_api.core.errors import MissingParameterError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting smart contract generator service...")
    logger.info(f"Using model {settings.OPENAI_MODEL} at {settings.OPENAI_API_URL}")
    if os.path.exists(settings.TEMPLATE_PATH):
        logger.info(f"✅ Reference template: {settings.TEMPLATE_PATH}")
    else:
        logger.warning(
            f"⚠️  Reference template not found at {settings.TEMPLATE_PATH}, "
            "generation requests will fail"
        )

    yield

    logger.info("Shutting down smart contract generator service...")


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(MissingParameterError)
async def missing_parameter_handler(request: Request, exc: MissingParameterError):
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.get("/test")
def test_endpoint():
    return {
        "service": "contract-generator",
        "status": "ok",
        "message": "hello from contract generator service",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
