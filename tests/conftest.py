from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from mindcare.main import app
from mindcare.services.assessment_service import _last_assessment_summary
from mindcare.utils.scoring import score

FIXED_TIME = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


def answers_summing_to(total, items):
    """Spread a raw score over ``items`` answers, filling each up to 3."""
    answers = []
    for _ in range(items):
        value = min(3, total)
        answers.append(value)
        total -= value
    return answers


class FirstChoice:
    """Stand-in random source that always picks the first template."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def answers_for():
    def _build(phq9_score, gad7_score):
        return answers_summing_to(phq9_score, 9), answers_summing_to(gad7_score, 7)
    return _build


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def last_assessment_doc():
    """Build the cached ``last_assessment`` map a user document would hold."""
    def _build(phq9_score, gad7_score):
        result = score(
            answers_summing_to(phq9_score, 9),
            answers_summing_to(gad7_score, 7),
            now=FIXED_TIME,
        )
        return _last_assessment_summary(result)
    return _build


@pytest.fixture
def user_snapshot():
    def _build(data=None, exists=True, doc_id="user-1"):
        snapshot = MagicMock()
        snapshot.exists = exists
        snapshot.id = doc_id
        snapshot.to_dict.return_value = data
        return snapshot
    return _build
