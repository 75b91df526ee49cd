"""Run execution domain exports."""

from .generation_run_use_case import (
    RunExecutionError,
    execute_generation_run,
    generate_from_request,
)
from .run_contracts import GenerationRequest, RunOutcome, RunRequest

__all__ = [
    "GenerationRequest",
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_generation_run",
    "generate_from_request",
]
