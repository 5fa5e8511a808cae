from typing import List

from fastapi import APIRouter, HTTPException, Query
from mindcare.models.request_models import AssessmentRequest, ScoreRequest
from mindcare.models.response_models import (
    AnswerOption,
    AssessmentSubmitResponse,
    HistoryEntry,
    LastAssessment,
    QuestionnaireResponse,
    ScoreResponse,
)
from mindcare.services.assessment_service import get_history, get_last_assessment, submit_assessment
from mindcare.utils.questionnaires import ANSWER_OPTIONS, GAD7_QUESTIONS, PHQ9_QUESTIONS
from mindcare.utils.scoring import personalized_guidance, score

router = APIRouter()


@router.get("/questions", response_model=QuestionnaireResponse)
def get_questions():
    return QuestionnaireResponse(
        phq9=PHQ9_QUESTIONS,
        gad7=GAD7_QUESTIONS,
        options=[AnswerOption(value=value, label=label) for value, label in ANSWER_OPTIONS],
    )


@router.post("/", response_model=AssessmentSubmitResponse, status_code=201)
def submit(payload: AssessmentRequest):
    assessment_id, result = submit_assessment(payload.user_id, payload.phq9_answers, payload.gad7_answers)
    return AssessmentSubmitResponse(
        assessment_id=assessment_id,
        result=result,
        guidance=personalized_guidance(result.phq9_score, result.gad7_score, result.suicidal_thoughts),
    )


@router.post("/score", response_model=ScoreResponse)
def score_only(payload: ScoreRequest):
    result = score(payload.phq9_answers, payload.gad7_answers)
    guidance = personalized_guidance(result.phq9_score, result.gad7_score, result.suicidal_thoughts)
    return ScoreResponse(result=result, guidance=guidance)


@router.get("/{user_id}/last", response_model=LastAssessment)
def last_assessment(user_id: str):
    last = get_last_assessment(user_id)
    if last is None:
        raise HTTPException(status_code=404, detail="No assessment found for this user")
    return last


@router.get("/{user_id}/history", response_model=List[HistoryEntry])
def history(user_id: str, limit: int = Query(10, ge=1, le=50)):
    return get_history(user_id, limit=limit)
