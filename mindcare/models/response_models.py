from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Personality(str, Enum):
    ENCOURAGING = "encouraging"
    SUPPORTIVE = "supportive"
    GENTLE = "gentle"
    CARING = "caring"
    CRISIS = "crisis"


class MoodBucket(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    CRISIS = "crisis"


class DominantMood(BaseModel):
    model_config = ConfigDict(frozen=True)

    mood: str
    percentage: float


class MoodPercentages(BaseModel):
    model_config = ConfigDict(frozen=True)

    happy: float
    calm: float
    sad: float
    stressed: float
    anxious: float
    depressed: float
    dominant_mood: DominantMood


class AssessmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    phq9_score: int
    gad7_score: int
    combined_score: int
    phq9_severity: str
    gad7_severity: str
    mood_percentages: MoodPercentages
    wellness_score: int
    ai_personality: Personality
    # PHQ-9 item 9 (thoughts of self-harm) answered above "Not at all".
    suicidal_thoughts: bool = False
    completed_at: datetime


class EmergencyContact(BaseModel):
    suicide: str
    crisis: str


class Guidance(BaseModel):
    level: str
    message: str
    ai_guidance: str
    suicidal_thoughts: bool = False
    emergency_contact: Optional[EmergencyContact] = None


class ScoreResponse(BaseModel):
    result: AssessmentResult
    guidance: Guidance


class AssessmentSubmitResponse(ScoreResponse):
    assessment_id: str


class LastAssessment(BaseModel):
    wellness_score: int
    phq9_score: int
    gad7_score: int
    phq9_severity: str
    gad7_severity: str
    suicidal_thoughts: bool = False
    mood_percentages: MoodPercentages
    ai_personality: Personality
    completed_at: datetime


class HistoryEntry(BaseModel):
    assessment_id: str
    result: AssessmentResult


class AnswerOption(BaseModel):
    value: int
    label: str


class QuestionnaireResponse(BaseModel):
    phq9: List[str]
    gad7: List[str]
    options: List[AnswerOption]


class GreetingResponse(BaseModel):
    greeting: str
    personality: Personality


class ChatResponse(BaseModel):
    reply: str
    personality: Personality
    mood_bucket: MoodBucket
    urgency: str


class CorrelationResponse(BaseModel):
    correlation: Optional[float] = None
    samples: int
    message: Optional[str] = None


class SummaryResponse(BaseModel):
    total_users: int
    assessed_users: int
    average_wellness: Optional[float] = None
    phq9_severity: Dict[str, int]
    gad7_severity: Dict[str, int]
    personalities: Dict[str, int]
    crisis_users: int
