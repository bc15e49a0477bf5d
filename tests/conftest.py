"""Pytest configuration and fixtures."""

import pytest

from schematype.constraints import Factory, LooseTypeCheck, TypeConstraint
from schematype.errors import ErrorCollector


@pytest.fixture
def factory() -> Factory:
    """Factory with the default (strict) classification."""
    return Factory()


@pytest.fixture
def errors() -> ErrorCollector:
    return ErrorCollector()


@pytest.fixture
def constraint(factory: Factory, errors: ErrorCollector) -> TypeConstraint:
    """Type constraint reporting into the ``errors`` fixture."""
    return factory.create_instance_for("type", sink=errors)


@pytest.fixture
def loose_constraint(errors: ErrorCollector) -> TypeConstraint:
    return Factory(LooseTypeCheck()).create_instance_for("type", sink=errors)
