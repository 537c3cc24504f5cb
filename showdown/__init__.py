"""Command-line host: validates arguments, runs the deal and renders every stage."""

from .arguments import InvalidArgumentsError, validate_arguments
from .session import SessionResult, run_session

__all__ = ["InvalidArgumentsError", "validate_arguments", "SessionResult", "run_session"]
