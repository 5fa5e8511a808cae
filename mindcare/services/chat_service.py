import logging

from mindcare.models.response_models import (
    ChatResponse,
    GreetingResponse,
    MoodBucket,
    Personality,
)
from mindcare.services.assessment_service import get_last_assessment
from mindcare.utils.responses import detect_mood_bucket, greeting, select_response

logger = logging.getLogger(__name__)

# Used until the student has completed an assessment.
DEFAULT_PERSONALITY = Personality.SUPPORTIVE
DEFAULT_WELLNESS = 75
DEFAULT_MOOD = "neutral"

URGENCY = {
    MoodBucket.CRISIS: "high",
    MoodBucket.NEGATIVE: "medium",
    MoodBucket.POSITIVE: "low",
    MoodBucket.NEUTRAL: "low",
}


def _user_context(user_id):
    last = get_last_assessment(user_id)
    if last is None:
        return DEFAULT_PERSONALITY, DEFAULT_WELLNESS, DEFAULT_MOOD
    return last.ai_personality, last.wellness_score, last.mood_percentages.dominant_mood.mood


def start_session(user_id):
    personality, wellness, mood = _user_context(user_id)
    return GreetingResponse(greeting=greeting(personality, wellness, mood), personality=personality)


def respond(user_id, message, rng=None):
    personality, wellness, mood = _user_context(user_id)

    bucket = detect_mood_bucket(message)
    if bucket is MoodBucket.CRISIS:
        logger.warning("Crisis language detected in chat for user %s", user_id)

    reply = select_response(personality, message, wellness, mood, rng=rng)
    return ChatResponse(
        reply=reply,
        personality=personality,
        mood_bucket=bucket,
        urgency=URGENCY[bucket],
    )
