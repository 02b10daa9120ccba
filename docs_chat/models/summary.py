"""
Summary response schema.

Dependencies: pydantic
System role: Summaries API contract
"""

from pydantic import BaseModel, Field

NO_PURPOSE = "(no purpose returned)"
NO_STATUS = "(no status returned)"


class SummaryResponse(BaseModel):
    """Purpose and progress summary of the two documents."""

    purpose: str = Field(description="High-level purpose of the files together")
    status: str = Field(description="Project progress implied by the files")
