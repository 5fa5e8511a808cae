"""Rule-based counselor replies.

Replies are picked from fixed template tables keyed by the assessment's
personality tone and by a coarse mood bucket detected from the student's
message. Templates use ``string.Template`` placeholders
``${wellness_score}`` and ``${dominant_mood}``.
"""
import logging
import random
import re
from string import Template

from mindcare.models.response_models import MoodBucket, Personality

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = (
    "I'm here to listen and support you. Can you tell me more about how you're feeling right now?"
)

# Checked in this order, first hit wins. Crisis phrases must match whole
# words ("send it" is not "end it"); the other buckets are plain substrings.
MOOD_KEYWORDS = [
    (MoodBucket.CRISIS, [
        "hurt myself", "kill myself", "suicide", "suicidal", "end it", "end my life",
        "can't go on", "cant go on", "want to die", "want to give up",
        "giving up on life", "no reason to live",
    ]),
    (MoodBucket.NEGATIVE, [
        "sad", "depressed", "awful", "terrible", "hate", "hopeless", "worthless",
        "worried", "anxious", "nervous", "scared", "panic", "overwhelmed", "lonely",
    ]),
    (MoodBucket.POSITIVE, [
        "happy", "good", "great", "excited", "wonderful", "amazing", "love", "better",
    ]),
]

CRISIS_RESOURCES = (
    "National Suicide Prevention Lifeline: 988\n"
    "Crisis Text Line: Text HOME to 741741\n"
    "Emergency Services: 911"
)

_CRISIS_REPLIES = [
    "I'm very concerned about what you're sharing, and your safety is the most important thing "
    "right now. Please reach out for immediate support:\n\n" + CRISIS_RESOURCES
    + "\n\nAre you in a safe place right now?",
    "Thank you for telling me this. What you're describing sounds really serious, and you "
    "deserve help from someone who can be with you right now:\n\n" + CRISIS_RESOURCES
    + "\n\nIs there someone nearby you can reach out to?",
]

RESPONSE_TEMPLATES = {
    Personality.ENCOURAGING: {
        MoodBucket.POSITIVE: [
            "That's fantastic to hear! It sounds like you're keeping up the positive energy from "
            "your assessment. What's been helping you stay in such a good headspace?",
            "I love your positive outlook! Your ${wellness_score}% wellness score really shows in "
            "your attitude. Tell me more about what's going well for you.",
            "This is wonderful! It's great to see you thriving. What goals are you working towards?",
        ],
        MoodBucket.NEUTRAL: [
            "Thanks for sharing that with me. With your ${wellness_score}% wellness score, you're in "
            "a good position to tackle whatever comes your way. What's on your mind?",
            "I appreciate you opening up. How can I help you build on the positive momentum "
            "you've been showing?",
            "What you're sharing fits with your overall positive assessment results. What would "
            "you like to explore further?",
        ],
        MoodBucket.NEGATIVE: [
            "I hear that things aren't feeling as positive right now, even though your overall "
            "wellness has been good at ${wellness_score}%. We all have ups and downs. What's "
            "changed recently?",
            "It sounds like you're experiencing some challenging feelings. Your strong foundation "
            "(your ${wellness_score}% score) will help you work through this. Tell me more.",
        ],
        MoodBucket.CRISIS: _CRISIS_REPLIES,
    },
    Personality.SUPPORTIVE: {
        MoodBucket.POSITIVE: [
            "I'm so glad to hear something positive! Your ${dominant_mood} feelings from the "
            "assessment suggested you might be working through some things, so it's wonderful to "
            "hear about bright spots. What's been helping?",
            "That's really encouraging! Even while dealing with some ${dominant_mood} feelings, "
            "you're finding positive moments. That shows real resilience.",
        ],
        MoodBucket.NEUTRAL: [
            "I understand. With your wellness score at ${wellness_score}% and some "
            "${dominant_mood} feelings, it makes sense that things feel mixed right now. What's the "
            "most important thing on your mind?",
            "Thanks for being open with me. Given what you shared in your assessment about feeling "
            "${dominant_mood}, how are you taking care of yourself?",
        ],
        MoodBucket.NEGATIVE: [
            "I can hear that you're struggling right now. Your assessment already showed "
            "${dominant_mood} feelings, and it sounds like that's continuing. You're not alone in "
            "this. What's been the hardest part?",
            "I'm really glad you're reaching out about this. Your ${wellness_score}% wellness score "
            "and ${dominant_mood} feelings suggest you could use some extra support. Let's work "
            "through this together.",
        ],
        MoodBucket.CRISIS: _CRISIS_REPLIES,
    },
    Personality.GENTLE: {
        MoodBucket.POSITIVE: [
            "I'm so grateful you shared something positive with me. With the ${dominant_mood} "
            "feelings and ${wellness_score}% wellness score from your assessment, these bright "
            "moments are really precious. What brought this good feeling?",
            "Thank you for sharing this light with me. How can we nurture more of these moments "
            "while you're working through the ${dominant_mood} feelings?",
        ],
        MoodBucket.NEUTRAL: [
            "I'm listening, and there's no pressure to feel any particular way. You're dealing with "
            "${dominant_mood} feelings at a ${wellness_score}% wellness level, so wherever you are "
            "today is okay. What feels most important to talk about?",
            "Thank you for being here with me. It takes courage to reach out while experiencing "
            "${dominant_mood} feelings. What's on your heart today?",
        ],
        MoodBucket.NEGATIVE: [
            "I hear you, and what you're feeling is completely valid. Your assessment already "
            "showed ${dominant_mood} feelings and a ${wellness_score}% wellness score, so this makes "
            "sense. You don't have to carry this alone. What's feeling heaviest right now?",
            "I'm really glad you're not keeping this inside. Let's take this one step at a time. "
            "What feels most urgent?",
        ],
        MoodBucket.CRISIS: _CRISIS_REPLIES,
    },
    Personality.CARING: {
        MoodBucket.POSITIVE: [
            "It means a lot that you're sharing something good with me. Given the "
            "${dominant_mood} feelings in your assessment, moments like this matter. What helped "
            "make it happen?",
        ],
        MoodBucket.NEUTRAL: [
            "I'm here with you. Your assessment showed significant ${dominant_mood} feelings and a "
            "${wellness_score}% wellness score. Have you been able to talk with a counselor about "
            "how you're doing?",
        ],
        MoodBucket.NEGATIVE: [
            "I can see you're in significant pain right now. Your assessment showed you were "
            "struggling with ${dominant_mood} feelings and a ${wellness_score}% wellness score. I "
            "think professional support could really help. Have you considered reaching out to a "
            "counselor or therapist?",
            "Thank you for sharing something so difficult with me. You deserve support beyond what "
            "I can provide. Can we talk about professional resources that might help?",
        ],
        MoodBucket.CRISIS: _CRISIS_REPLIES,
    },
    Personality.CRISIS: {
        MoodBucket.POSITIVE: [
            "I'm glad something felt good today. Your assessment (${wellness_score}% wellness) still "
            "worries me, so please keep these numbers close:\n\n" + CRISIS_RESOURCES,
        ],
        MoodBucket.NEUTRAL: [
            "Thank you for talking with me. Your assessment showed severe concerns "
            "(${wellness_score}% wellness, ${dominant_mood} feelings), and I want to be sure you have "
            "support right now:\n\n" + CRISIS_RESOURCES + "\n\nAre you safe right now?",
        ],
        MoodBucket.NEGATIVE: [
            "I'm really worried about you. Your assessment showed severe ${dominant_mood} feelings, "
            "and what you're sharing now suggests you need more support than I can give. Please "
            "contact:\n\n" + CRISIS_RESOURCES + "\n\nDo you have someone who can be with you?",
        ],
        MoodBucket.CRISIS: [
            "IMMEDIATE HELP NEEDED\n\nI'm extremely concerned about your safety. Your assessment "
            "showed severe concerns (${wellness_score}% wellness, ${dominant_mood} feelings), and "
            "what you're sharing now indicates you may be in crisis.\n\nPLEASE CONTACT "
            "IMMEDIATELY:\n" + CRISIS_RESOURCES + "\nOr go to the nearest emergency room.\n\n"
            "Are you safe right now? Do you have someone who can be with you?",
        ],
    },
}

GREETINGS = {
    Personality.ENCOURAGING: (
        "Hello! I can see from your assessment that you're in a pretty good place mentally "
        "(${wellness_score}% wellness score). I'm here to help you keep that positive momentum. "
        "What would you like to talk about today?"
    ),
    Personality.SUPPORTIVE: (
        "Hi there! Thanks for sharing your assessment results with me. I can see you're "
        "experiencing some ${dominant_mood} feelings, and your wellness score is "
        "${wellness_score}%. How are you feeling right now?"
    ),
    Personality.GENTLE: (
        "Hello, and thank you for trusting me with your assessment results. I understand you "
        "might be going through some challenging times, especially with feeling ${dominant_mood}. "
        "I'm here to listen at whatever pace feels comfortable. What would you like to share?"
    ),
    Personality.CARING: (
        "Hi there. I'm really glad you're reaching out. Your recent assessment shows you're "
        "experiencing significant ${dominant_mood} feelings, and your wellness score is "
        "${wellness_score}%. What you're feeling is valid. How can I support you today?"
    ),
    Personality.CRISIS: (
        "Hello, I'm very concerned about your wellbeing based on your assessment results. Your "
        "wellness score of ${wellness_score}% and the ${dominant_mood} feelings you're "
        "experiencing suggest you may need immediate support. Are you in a safe place right now?"
    ),
}


WHOLE_WORD_BUCKETS = {MoodBucket.CRISIS}


def _mentions(text: str, keyword: str, whole_words: bool) -> bool:
    if whole_words:
        return re.search(r"\b" + re.escape(keyword) + r"\b", text) is not None
    return keyword in text


def detect_mood_bucket(message: str) -> MoodBucket:
    text = message.lower()
    for bucket, keywords in MOOD_KEYWORDS:
        whole_words = bucket in WHOLE_WORD_BUCKETS
        if any(_mentions(text, keyword, whole_words) for keyword in keywords):
            return bucket
    return MoodBucket.NEUTRAL


def is_crisis_message(message: str) -> bool:
    return detect_mood_bucket(message) is MoodBucket.CRISIS


def _fill(template: str, wellness_score, dominant_mood) -> str:
    return Template(template).safe_substitute(
        wellness_score=wellness_score, dominant_mood=dominant_mood
    )


def select_response(
    personality,
    message: str,
    wellness_score: int,
    dominant_mood: str,
    rng=None,
    table=None,
) -> str:
    """Pick a reply template for the message and fill in the assessment values.

    ``rng`` only needs a ``choice`` method; pass ``random.Random(seed)`` for
    repeatable output. Misses in the table give FALLBACK_RESPONSE.
    """
    rng = rng or random
    table = RESPONSE_TEMPLATES if table is None else table

    bucket = detect_mood_bucket(message)
    candidates = table.get(personality, {}).get(bucket)
    if not candidates:
        logger.debug("No templates for %s/%s, using fallback", personality, bucket.value)
        return FALLBACK_RESPONSE

    return _fill(rng.choice(candidates), wellness_score, dominant_mood)


def greeting(personality, wellness_score: int, dominant_mood: str) -> str:
    template = GREETINGS.get(personality, GREETINGS[Personality.SUPPORTIVE])
    return _fill(template, wellness_score, dominant_mood)
