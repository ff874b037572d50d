"""
Company Research Endpoint
=========================
POST /api/research   body: {"url": "stripe.com"}

Locates the careers page, detects the ATS, counts live roles and returns a
LinkedIn X-ray search URL for the company's recruiters.
"""

import asyncio
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ats_research import InvalidInputError, ProspectResearcher
from config import settings
from models import ErrorResponse, ResearchRequest, ResearchResult

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["research"])

researcher = ProspectResearcher()

GENERIC_FAILURE = "Failed to research company. Please try again."
TIMEOUT_FAILURE = "Research timed out. Please try again."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/research",
    response_model=ResearchResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
async def research_company(request: ResearchRequest):
    """
    Research one company website

    The pipeline is blocking (requests + thread pool), so it runs in the
    default executor under an overall deadline.
    """
    try:
        loop = asyncio.get_event_loop()
        return await asyncio.wait_for(
            loop.run_in_executor(None, researcher.research, request.url),
            timeout=settings.research_deadline_seconds,
        )
    except InvalidInputError as e:
        logger.info(f"Rejected input {request.url!r}: {e}")
        return _error(400, str(e))
    except asyncio.TimeoutError:
        logger.error(f"⏱ Research of {request.url!r} exceeded {settings.research_deadline_seconds}s")
        return _error(504, TIMEOUT_FAILURE)
    except Exception as e:
        logger.error(f"Research failed for {request.url!r}: {e}", exc_info=True)
        return _error(500, GENERIC_FAILURE)
