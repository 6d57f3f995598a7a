from fastapi import APIRouter
from contract_api.api.endpoints import demo, generation

api_router = APIRouter()
api_router.include_router(generation.router, tags=["generation"])
api_router.include_router(demo.router, tags=["demo"])
