"""Maps use case failures onto ProblemDetails-style CLI errors."""

from __future__ import annotations

from dataclasses import dataclass

import click
from loguru import logger

from inventory_manager.application.result import (
    ConflictError,
    DomainError,
    ErrorKind,
    Failure,
    NotFoundError,
    ValidationError,
)


@dataclass(frozen=True)
class Problem:
    status: int
    detail: str
    errors: dict[str, list[str]] | None = None

    def render(self) -> str:
        lines = [f"Error ({self.status}): {self.detail}"]
        for field_name, messages in (self.errors or {}).items():
            lines.extend(f"  {field_name}: {message}" for message in messages)
        return "\n".join(lines)


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.DOMAIN: 422,
    ErrorKind.UNHANDLED: 500,
}

UNEXPECTED_ERROR = "An unexpected error occurred."


def problem_for(failure: Failure) -> Problem:
    match failure:
        case ValidationError(errors=errors):
            detail = "One or more validation errors occurred."
            return Problem(STATUS_BY_KIND[failure.kind], detail, errors)
        case NotFoundError() | ConflictError() | DomainError():
            return Problem(STATUS_BY_KIND[failure.kind], failure.message)
    raise TypeError(f"Not a failure result: {failure!r}")


def unhandled_problem() -> Problem:
    return Problem(STATUS_BY_KIND[ErrorKind.UNHANDLED], UNEXPECTED_ERROR)


class ProblemException(click.ClickException):
    """A click error whose message is a rendered Problem."""

    def __init__(self, problem: Problem) -> None:
        super().__init__(problem.render())
        self.problem = problem

    def format_message(self) -> str:
        return self.message

    def show(self, file=None) -> None:
        click.echo(self.format_message(), file=file, err=True)


def fail(failure: Failure) -> ProblemException:
    return ProblemException(problem_for(failure))


def fail_unexpected(exc: Exception) -> ProblemException:
    logger.opt(exception=exc).error("Unhandled error: {}", exc)
    return ProblemException(unhandled_problem())
