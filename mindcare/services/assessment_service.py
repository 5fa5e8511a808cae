import logging

from firebase_admin import firestore

from mindcare.models.response_models import (
    AssessmentResult,
    HistoryEntry,
    LastAssessment,
)
from mindcare.utils.firestore import get_db, user_ref
from mindcare.utils.scoring import score

logger = logging.getLogger(__name__)

ASSESSMENT_TYPE = "PHQ9_GAD7_Combined"


def _last_assessment_summary(result: AssessmentResult) -> dict:
    return {
        "wellness_score": result.wellness_score,
        "phq9_score": result.phq9_score,
        "gad7_score": result.gad7_score,
        "phq9_severity": result.phq9_severity,
        "gad7_severity": result.gad7_severity,
        "suicidal_thoughts": result.suicidal_thoughts,
        "mood_percentages": result.mood_percentages.model_dump(mode="json"),
        "ai_personality": result.ai_personality.value,
        # Stored as a Firestore Timestamp so ordering follows time.
        "completed_at": result.completed_at,
    }


def _history_record(result: AssessmentResult, phq9_answers, gad7_answers) -> dict:
    return {
        "type": ASSESSMENT_TYPE,
        "phq9_answers": list(phq9_answers),
        "gad7_answers": list(gad7_answers),
        **result.model_dump(mode="json"),
        "completed_at": result.completed_at,
    }


def submit_assessment(user_id, phq9_answers, gad7_answers):
    """Score a sitting, store it in the user's history and cache it as the last assessment.

    Both documents are written in one batch, so either the history entry and
    the cached ``last_assessment`` land together or neither does.
    """
    result = score(phq9_answers, gad7_answers)

    user = user_ref(user_id)
    doc = user.collection("assessments").document()

    batch = get_db().batch()
    batch.set(doc, _history_record(result, phq9_answers, gad7_answers))
    batch.set(user, {"last_assessment": _last_assessment_summary(result)}, merge=True)
    try:
        batch.commit()
    except Exception:
        logger.exception("Could not save assessment for user %s", user_id)
        raise

    logger.info(
        "Saved assessment %s for user %s (personality=%s)",
        doc.id, user_id, result.ai_personality.value,
    )
    return doc.id, result


def get_last_assessment(user_id):
    snapshot = user_ref(user_id).get()
    if not snapshot.exists:
        return None

    data = snapshot.to_dict().get("last_assessment")
    if not data:
        return None
    return LastAssessment(**data)


def get_history(user_id, limit=10):
    query = (
        user_ref(user_id)
        .collection("assessments")
        .order_by("completed_at", direction=firestore.Query.DESCENDING)
        .limit(limit)
    )

    history = []
    for doc in query.stream():
        history.append(HistoryEntry(assessment_id=doc.id, result=AssessmentResult(**doc.to_dict())))
    return history
