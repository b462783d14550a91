"""
Pipeline error taxonomy.
Every failure carries a stable category and the stage the run was in.
"""
from typing import Optional

from models.chat import PipelineStage


class PipelineError(Exception):
    category = "pipeline"

    def __init__(self, message: str, stage: Optional[PipelineStage] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage


class ValidationError(PipelineError):
    """Question or schema missing at pipeline entry."""
    category = "validation"


class DataAccessError(PipelineError):
    """Schema read or execution-time database failure."""
    category = "data_access"


class ExecutionError(DataAccessError):
    """The approved statement failed on the database."""

    def __init__(self, message: str, statement: str, stage: Optional[PipelineStage] = None):
        super().__init__(message, stage)
        self.statement = statement


class GenerationError(PipelineError):
    """A language-model call failed or returned nothing."""
    category = "generation"

    def __init__(self, message: str, step: str, stage: Optional[PipelineStage] = None):
        super().__init__(message, stage)
        self.step = step   # "sql" | "answer"


class UnsafeStatementError(PipelineError):
    category = "unsafe_statement"

    def __init__(self, message: str, statement: str, stage: Optional[PipelineStage] = None):
        super().__init__(message, stage)
        self.statement = statement
