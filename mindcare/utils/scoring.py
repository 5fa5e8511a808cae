import math
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from mindcare.models.response_models import (
    AssessmentResult,
    DominantMood,
    EmergencyContact,
    Guidance,
    MoodPercentages,
    Personality,
)

PHQ9_ITEMS = 9
GAD7_ITEMS = 7
MAX_ANSWER = 3

PHQ9_MAX = PHQ9_ITEMS * MAX_ANSWER
GAD7_MAX = GAD7_ITEMS * MAX_ANSWER
COMBINED_MAX = PHQ9_MAX + GAD7_MAX

PHQ9_SEVERITY = {
    (0, 4): "Minimal",
    (5, 9): "Mild",
    (10, 14): "Moderate",
    (15, 19): "Moderately Severe",
    (20, 27): "Severe",
}

GAD7_SEVERITY = {
    (0, 4): "Minimal",
    (5, 9): "Mild",
    (10, 14): "Moderate",
    (15, 21): "Severe",
}

# Upper bound of combined raw score for each tone, checked in order.
PERSONALITY_THRESHOLDS = [
    (8, Personality.ENCOURAGING),
    (16, Personality.SUPPORTIVE),
    (24, Personality.GENTLE),
    (32, Personality.CARING),
]

MOOD_ORDER = ("happy", "calm", "sad", "stressed", "anxious", "depressed")

# PHQ-9 item 9: "Thoughts that you would be better off dead, or of hurting yourself"
SELF_HARM_ITEM = 8

EMERGENCY_CONTACT = EmergencyContact(suicide="988", crisis="741741")

SELF_HARM_WARNING = (
    "IMPORTANT: You indicated thoughts of self-harm. Please contact a crisis helpline "
    "or emergency services immediately."
)


class AssessmentError(ValueError):
    """Raised when questionnaire answers cannot be scored."""


class IncompleteAssessmentError(AssessmentError):
    """An item was left unanswered or the questionnaire is the wrong length."""


class InvalidAnswerError(AssessmentError):
    """An item holds something other than an integer in [0, 3]."""


def get_severity(score: int, mapping: dict):
    for (low, high), label in mapping.items():
        if low <= score <= high:
            return label
    return "Unknown"


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def validate_answers(name: str, answers: Optional[Sequence], expected: int) -> List[int]:
    if answers is None:
        raise IncompleteAssessmentError(f"{name} answers are missing")
    answers = list(answers)
    if len(answers) != expected:
        raise IncompleteAssessmentError(
            f"{name} needs {expected} answers, got {len(answers)}"
        )
    for idx, value in enumerate(answers, start=1):
        if value is None:
            raise IncompleteAssessmentError(f"{name} item {idx} is unanswered")
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidAnswerError(f"{name} item {idx} must be an integer")
        if not 0 <= value <= MAX_ANSWER:
            raise InvalidAnswerError(
                f"{name} item {idx} must be between 0 and {MAX_ANSWER}"
            )
    return answers


def mood_percentages(phq9_score: int, gad7_score: int) -> Dict[str, float]:
    depression_level = phq9_score / PHQ9_MAX * 100
    anxiety_level = gad7_score / GAD7_MAX * 100
    combined_normalized = (phq9_score + gad7_score) / COMBINED_MAX * 100

    return {
        "happy": _clamp(100 - combined_normalized),
        "calm": _clamp(100 - anxiety_level),
        "sad": _clamp(depression_level * 0.7),
        "stressed": _clamp(anxiety_level),
        "anxious": _clamp(anxiety_level * 0.8),
        "depressed": _clamp(depression_level),
    }


def dominant_mood(moods: Dict[str, float]) -> DominantMood:
    """Highest mood value; on a tie the mood earliest in MOOD_ORDER wins."""
    best = None
    for name in MOOD_ORDER:
        if best is None or moods[name] > moods[best]:
            best = name
    return DominantMood(mood=best, percentage=moods[best])


def wellness_score(phq9_score: int, gad7_score: int) -> int:
    raw = 100 - (phq9_score + gad7_score) / COMBINED_MAX * 100
    return int(_clamp(_round_half_up(raw)))


def ai_personality(combined_score: int) -> Personality:
    for upper, personality in PERSONALITY_THRESHOLDS:
        if combined_score <= upper:
            return personality
    return Personality.CRISIS


def _score_guidance(phq9_score: int, gad7_score: int) -> Guidance:
    if phq9_score >= 15 or gad7_score >= 15:
        message = "You are experiencing significant mental health challenges. "
        if phq9_score >= 15:
            message += "You show signs of moderate to severe depression. "
        if gad7_score >= 15:
            message += "You show signs of severe anxiety. "
        return Guidance(
            level="error",
            message=message.strip(),
            ai_guidance=(
                "It's important to seek professional help immediately. Our AI counselor "
                "can provide immediate support while you connect with a healthcare provider."
            ),
        )

    if phq9_score >= 10 or gad7_score >= 10:
        message = "You are experiencing moderate mental health concerns. "
        if phq9_score >= 10:
            message += "You show signs of moderate depression. "
        if gad7_score >= 10:
            message += "You show signs of moderate anxiety. "
        return Guidance(
            level="warning",
            message=message.strip(),
            ai_guidance=(
                "Consider speaking with a counselor or therapist. Our AI counselor can help "
                "you develop coping strategies and provide emotional support."
            ),
        )

    if phq9_score >= 5 or gad7_score >= 5:
        message = "You are experiencing mild mental health symptoms. "
        if phq9_score >= 5:
            message += "You show signs of mild depression. "
        if gad7_score >= 5:
            message += "You show signs of mild anxiety. "
        return Guidance(
            level="warning",
            message=message.strip(),
            ai_guidance=(
                "These symptoms are manageable with proper support. Our AI counselor can "
                "help you learn effective coping techniques and stress management."
            ),
        )

    return Guidance(
        level="success",
        message="Your mental health appears to be in good condition.",
        ai_guidance=(
            "Great job maintaining your mental wellness! Our AI counselor can help you "
            "continue building resilience and positive mental habits."
        ),
    )


def personalized_guidance(phq9_score: int, gad7_score: int, suicidal_thoughts: bool = False) -> Guidance:
    """Advice shown with a result. Any self-harm answer overrides the score band."""
    guidance = _score_guidance(phq9_score, gad7_score)
    if not suicidal_thoughts:
        return guidance

    return Guidance(
        level="error",
        message=f"{SELF_HARM_WARNING} {guidance.message}",
        ai_guidance=(
            "Please reach out to the 988 Suicide & Crisis Lifeline or text HOME to 741741 now. "
            "Our AI counselor and your college counsellor are here for you as well."
        ),
        suicidal_thoughts=True,
        emergency_contact=EMERGENCY_CONTACT,
    )


def score(
    phq9_answers: Sequence[Optional[int]],
    gad7_answers: Sequence[Optional[int]],
    now: Optional[datetime] = None,
) -> AssessmentResult:
    """Score one completed PHQ-9 + GAD-7 sitting.

    Raises IncompleteAssessmentError when any item is unanswered and
    InvalidAnswerError when an item is outside 0-3. Nothing is returned
    for a partial sitting.
    """
    phq9 = validate_answers("PHQ-9", phq9_answers, PHQ9_ITEMS)
    gad7 = validate_answers("GAD-7", gad7_answers, GAD7_ITEMS)

    phq9_score = sum(phq9)
    gad7_score = sum(gad7)
    combined = phq9_score + gad7_score

    moods = mood_percentages(phq9_score, gad7_score)

    return AssessmentResult(
        phq9_score=phq9_score,
        gad7_score=gad7_score,
        combined_score=combined,
        phq9_severity=get_severity(phq9_score, PHQ9_SEVERITY),
        gad7_severity=get_severity(gad7_score, GAD7_SEVERITY),
        mood_percentages=MoodPercentages(**moods, dominant_mood=dominant_mood(moods)),
        wellness_score=wellness_score(phq9_score, gad7_score),
        ai_personality=ai_personality(combined),
        suicidal_thoughts=phq9[SELF_HARM_ITEM] > 0,
        completed_at=now or datetime.now(timezone.utc),
    )
