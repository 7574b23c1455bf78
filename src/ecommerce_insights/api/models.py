"""Request models for the analysis API."""

from pydantic import BaseModel, Field


class AnalysisRequest(BaseModel):
    """CSV upload submitted as text."""

    csv_text: str = Field(min_length=1)
    explain: bool = True
