"""
Contract generation endpoint.
"""
import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...core.config import settings
from ...core.errors import ExtractionError, UpstreamError
from ...schemas.generation import ErrorResponse, GenerationRequest, GenerationResponse
from ...services.generator import ContractGenerator
from ...services.openai_client import OpenAIChatClient

logger = logging.getLogger(__name__)

router = APIRouter()


def get_generator() -> ContractGenerator:
    client = OpenAIChatClient(
        api_key=settings.OPENAI_API_KEY,
        url=settings.OPENAI_API_URL,
        model=settings.OPENAI_MODEL,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
    )
    return ContractGenerator(client, settings.TEMPLATE_PATH)


@router.post(
    "/generateRust",
    response_model=GenerationResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_contract(
    request: GenerationRequest,
    generator: ContractGenerator = Depends(get_generator),
):
    """
    Generate smart-contract code from a description in the requested language.
    """
    try:
        code = await generator.generate(request.description, request.language)
        return GenerationResponse(code=code)
    except UpstreamError as e:
        logger.error(f"OpenAI API Error: {e} (status={e.status_code}, body={e.detail})")
        return JSONResponse(
            status_code=500,
            content={"error": f"Error generating {request.language} code."},
        )
    except ExtractionError as e:
        logger.error(f"Extraction failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})
