from pydantic import BaseModel, Field


class GenerationRequest(BaseModel):
    description: str = Field(..., description="Natural-language contract description")
    language: str = Field(..., description="Target language, e.g. rust or typescript")


class GenerationResponse(BaseModel):
    code: str


class ErrorResponse(BaseModel):
    error: str
