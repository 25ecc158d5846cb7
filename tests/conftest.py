"""Shared test fixtures for validation-fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from validation_fields.models.config import Settings
from validation_fields.services.validator_set import ValidatorSet, valid_form

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VALIDATION_FIELDS_* variables from the host out of the tests."""
    for name in (
        "VALIDATION_FIELDS_LOG_LEVEL",
        "VALIDATION_FIELDS_DEFAULT_DATE_FORMAT",
        "VALIDATION_FIELDS_CPF_REJECT_REPEATED_DIGITS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after a test configures logging."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def validators() -> ValidatorSet:
    """Validator set with default behavior."""
    return valid_form()


@pytest.fixture
def strict_settings() -> Settings:
    """Settings with pt dates and repeated-digit CPFs rejected."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        default_date_format="pt",
        cpf_reject_repeated_digits=True,
    )


@pytest.fixture
def sample_form() -> dict[str, str | None]:
    """A submitted form with one empty and one null field."""
    return {
        "name": "Maria Souza",
        "email": "maria@example.com",
        "phone": "",
        "cpf": None,
    }
