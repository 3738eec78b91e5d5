"""Tests for mapping use case failures onto CLI problems."""

import pytest

from inventory_manager.application.result import (
    ConflictError,
    DomainError,
    NotFoundError,
    Success,
    ValidationError,
)
from inventory_manager.infrastructure.cli.errors import problem_for, unhandled_problem


class TestProblemFor:

    @pytest.mark.parametrize(
        "failure, status",
        [
            (NotFoundError("gone"), 404),
            (ConflictError("taken"), 409),
            (DomainError("refused"), 422),
        ],
    )
    def test_message_failures_keep_their_message(self, failure, status):
        problem = problem_for(failure)
        assert problem.status == status
        assert problem.render() == f"Error ({status}): {failure.message}"

    def test_validation_renders_every_field_message(self):
        problem = problem_for(ValidationError(errors={"Sku": ["a", "b"], "Name": ["c"]}))
        assert problem.render().splitlines() == [
            "Error (400): One or more validation errors occurred.",
            "  Sku: a",
            "  Sku: b",
            "  Name: c",
        ]

    def test_success_is_not_a_problem(self):
        with pytest.raises(TypeError):
            problem_for(Success(None))

    def test_unhandled_is_generic(self):
        assert unhandled_problem().render() == "Error (500): An unexpected error occurred."
