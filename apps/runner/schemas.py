"""Pydantic schemas for runner configuration."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class RunConfig(BaseModel):
    """Which computation to run and how long it may take."""
    algorithm: Literal["sort", "sqrt", "argmax"] = "sort"
    deadline_ms: float = Field(10.0, ge=0)
    record: bool = False


class DataConfig(BaseModel):
    """Input generation for the selected computation."""
    size: int = Field(1000, ge=0)
    seed: Optional[int] = None
    low: int = 0
    high: int = 256
    value: float = Field(2.0, ge=0)
    chunk_size: int = Field(1024, ge=1)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["structured", "simple"] = "structured"


class OutputConfig(BaseModel):
    recordings_path: str = "./recordings/run"
    show_data: bool = True


class RunnerConfig(BaseModel):
    """Complete runner configuration, one section per YAML block."""
    run: RunConfig = Field(default_factory=RunConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
