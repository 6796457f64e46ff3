"""
Configuration management using Pydantic Settings.

Environment variables:
- MDJSON_OUTPUT_FILENAME: Consolidated output path (default content.json)
- MDJSON_CONSOLIDATE: Emit one nested JSON tree instead of one file per document
- MDJSON_SMARTYPANTS: Typographic quotes and dashes in rendered markup
- MDJSON_STRICT_PATHS: Fail when two documents map to the same tree key
- MDJSON_JSON_INDENT: Indentation for written JSON
- MDJSON_STOP_ON_ERROR: Abort the run on the first failing document
"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import DEFAULT_OUTPUT_FILENAME


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Output
    mdjson_output_filename: str = Field(default=DEFAULT_OUTPUT_FILENAME)
    mdjson_consolidate: bool = Field(default=False)
    mdjson_json_indent: Optional[int] = Field(default=None, ge=0)
    
    # Rendering
    mdjson_smartypants: bool = Field(default=False)
    
    # Failure handling
    mdjson_strict_paths: bool = Field(default=False)
    mdjson_stop_on_error: bool = Field(default=True)
    
    def get_renderer_options(self) -> dict:
        """Get renderer options as dictionary."""
        return {
            'smartypants': self.mdjson_smartypants,
        }
    
    def get_pipeline_config(self) -> dict:
        """Get pipeline configuration as dictionary."""
        return {
            'output_filename': self.mdjson_output_filename,
            'consolidate': self.mdjson_consolidate,
            'json_indent': self.mdjson_json_indent,
            'strict_paths': self.mdjson_strict_paths,
            'stop_on_error': self.mdjson_stop_on_error,
        }
