from collections import Counter

from fastapi import APIRouter
from mindcare.models.response_models import CorrelationResponse, SummaryResponse
from mindcare.utils.firestore import get_db
from mindcare.utils.scoring import GAD7_SEVERITY, PHQ9_SEVERITY
import numpy as np

router = APIRouter()


def _last_assessments():
    total = 0
    assessed = []
    for user in get_db().collection("users").stream():
        total += 1
        last = (user.to_dict() or {}).get("last_assessment")
        if last:
            assessed.append(last)
    return total, assessed


@router.get("/correlation", response_model=CorrelationResponse)
def phq9_gad7_correlation():
    _, assessed = _last_assessments()

    phq_scores = [a["phq9_score"] for a in assessed]
    gad_scores = [a["gad7_score"] for a in assessed]

    if len(phq_scores) < 2:
        return CorrelationResponse(samples=len(phq_scores), message="Not enough data")

    if np.std(phq_scores) == 0 or np.std(gad_scores) == 0:
        return CorrelationResponse(samples=len(phq_scores), message="Scores do not vary")

    corr = np.corrcoef(phq_scores, gad_scores)[0, 1]

    return CorrelationResponse(correlation=float(corr), samples=len(phq_scores))


@router.get("/summary", response_model=SummaryResponse)
def dashboard_summary():
    total, assessed = _last_assessments()

    phq_counts = dict.fromkeys(PHQ9_SEVERITY.values(), 0)
    gad_counts = dict.fromkeys(GAD7_SEVERITY.values(), 0)
    personalities = Counter()

    for last in assessed:
        phq_counts[last["phq9_severity"]] = phq_counts.get(last["phq9_severity"], 0) + 1
        gad_counts[last["gad7_severity"]] = gad_counts.get(last["gad7_severity"], 0) + 1
        personalities[last["ai_personality"]] += 1

    wellness = [last["wellness_score"] for last in assessed]

    return SummaryResponse(
        total_users=total,
        assessed_users=len(assessed),
        average_wellness=round(float(np.mean(wellness)), 1) if wellness else None,
        phq9_severity=phq_counts,
        gad7_severity=gad_counts,
        personalities=dict(personalities),
        crisis_users=personalities.get("crisis", 0),
    )
