"""
Source document configuration settings.

Locations and size limits for the two fixed documents served by the app.

Dependencies: pydantic, pydantic_settings
System role: Document source configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentSettings(BaseSettings):
    """Paths and truncation limits for the CSV and PDF sources."""

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(default=Path("."), description="Directory holding the source files")
    csv_filename: str = Field(
        default="long-term-sales-data.csv",
        description="Sales dataset file name",
    )
    pdf_filename: str = Field(
        default="Online Garment Tracking and Management System.pdf",
        description="Project description file name",
    )
    max_chars: int = Field(
        default=12000,
        gt=0,
        description="Loaded document text is truncated to this many characters",
    )

    @property
    def csv_path(self) -> Path:
        return self.data_dir / self.csv_filename

    @property
    def pdf_path(self) -> Path:
        return self.data_dir / self.pdf_filename
