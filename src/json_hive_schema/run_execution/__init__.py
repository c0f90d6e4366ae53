"""Run execution domain exports."""

from .generation_run_use_case import (
    GENERATION_ERRORS,
    RunExecutionError,
    execute_schema_generation_run,
    generate_ddl,
)
from .run_contracts import GeneratedDDL, RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "GeneratedDDL",
    "GENERATION_ERRORS",
    "RunExecutionError",
    "execute_schema_generation_run",
    "generate_ddl",
]
