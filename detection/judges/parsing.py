"""Prompt and response parsing shared by the provider adapters."""

import json

from common.errors import ModelFailure
from detection.aggregation import round_half_up
from detection.types import ModelScore

SYSTEM_PROMPT = """You are an AI content detection expert. Analyze the given text and determine how likely it is to be AI-generated.

Score from 0-10:
- 0-2: Clearly human-written (informal, typos, unique voice, personal anecdotes)
- 3-4: Mostly human (some polished sections but overall natural)
- 5-6: Uncertain/mixed (could be AI-assisted or a very polished human writer)
- 7-8: Likely AI (formulaic structure, smooth transitions, generic language)
- 9-10: Almost certainly AI (textbook AI patterns, no personality, template-like)

Strong AI indicators (increase score when present):
- Em dashes, en dashes, or excessive hyphenated constructions; humans rarely use these in casual writing
- Overused AI vocabulary: plethora, delve, leverage, unleash, unlock, harness, revolutionize, paradigm, synergy, holistic, nuanced, robust, transformative, cutting-edge, game-changer, supercharge, tapestry, bustling, myriad, pivotal, comprehensive, framework, trajectory, spectrum, facet, confluence, remarkable
- Formal filler phrases: "it's worth noting", "in today's world", "let's dive in", "moreover", "furthermore", "additionally", "in light of", "studies have shown", "experts agree", "all things considered", "subsequently", "to some extent", "it can be argued"
- Every paragraph starting with transition words
- Excessive passive voice and academic hedging
- Repetitive sentence structures with uniform length
- Generic examples without specificity
- Excessive superlatives

Strong human indicators (decrease score when present):
- Typos, slang, abbreviations (lol, tbh, fr, smh, ngl)
- Incomplete sentences, stream of consciousness
- Personal anecdotes with specific details
- Irregular punctuation, multiple exclamation/question marks
- Contractions and casual tone
- Unique voice and personality

Respond ONLY with valid JSON in this exact format:
{"score": <0-10>, "confidence": <0.0-1.0>}

No other text. Just the JSON."""

USER_TEMPLATE = "Analyze this text for AI generation:\n\n{text}"


def parse_score(content, provider: str) -> ModelScore:
    """
    Parse a model reply into a ModelScore.

    Accepts bare JSON or JSON wrapped in prose / markdown fences (the
    outermost {...} slice is tried). Score is clamped to 0-10, confidence
    to [0, 1].

    Raises:
        ModelFailure: non-text reply, no JSON object, or missing / non-numeric
            fields.
    """
    if content is None:
        content = ""
    if not isinstance(content, str):
        raise ModelFailure(provider, f"Model response content is not text: {type(content).__name__}")
    content = content.strip()
    try:
        payload = json.loads(content)
    except json.JSONDecodeError:
        start = content.find('{')
        end = content.rfind('}')
        if start == -1 or end < start:
            raise ModelFailure(provider, f"No JSON in model response: {content[:200]!r}")
        try:
            payload = json.loads(content[start:end + 1])
        except json.JSONDecodeError as e:
            raise ModelFailure(provider, f"Failed to parse model JSON: {e}, raw: {content[:200]!r}")

    if not isinstance(payload, dict):
        raise ModelFailure(provider, f"Model response is not an object: {content[:200]!r}")

    try:
        score = float(payload["score"])
        confidence = float(payload.get("confidence", 0.5))
    except (KeyError, TypeError, ValueError) as e:
        raise ModelFailure(provider, f"Model response missing score/confidence: {e}")

    if score != score or confidence != confidence:  # NaN
        raise ModelFailure(provider, "Model response contains NaN")

    return ModelScore(
        value=round_half_up(min(10.0, max(0.0, score))),
        confidence=min(1.0, max(0.0, confidence)),
    )
