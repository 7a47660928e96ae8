from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from featurecheck.models import FeatureRule
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture(autouse=True)
def _reset_featurecheck_logger() -> Iterator[None]:
    """Undo CLI logging setup so handlers never outlive a test's captured streams."""
    yield
    logger = logging.getLogger("featurecheck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture
def rules() -> list[FeatureRule]:
    """A small rule set with a specific override declared before a catch-all."""
    return [
        FeatureRule(id="billing-ui", name="Billing UI", category="Commerce", paths=("/web/billing/",)),
        FeatureRule(id="billing", name="Billing", category="Commerce", paths=("/billing/", "/invoices/")),
        FeatureRule(id="web", name="Web App", category="Frontend", paths=("/web/",)),
    ]
