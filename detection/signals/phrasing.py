"""Phrase-level signals: formulaic filler and promotional copy."""

import re

from detection.protocols import SignalExtractor
from detection.types import SignalName, TextSample

FORMULAIC_PHRASES = [
    "in today's world",
    "in today's fast-paced",
    "it's important to note",
    "it is important to note",
    "it's worth noting",
    "it is worth noting",
    "in conclusion",
    "delve into",
    "dive into",
    "let's dive in",
    "let's explore",
    "at the end of the day",
    "navigate the complexities",
    "in this article",
    "here's the thing",
    "without further ado",
    "that being said",
    "having said that",
    "comprehensive guide",
    "furthermore",
    "moreover",
    "additionally",
    "in light of",
    "in the realm of",
    "paradigm shift",
    "holistic approach",
    "thought leader",
    "value proposition",
    "best practices",
    "circle back",
    "unpack this",
    "at its core",
    "it goes without saying",
    "studies have shown",
    "experts agree",
    "all things considered",
    "to some extent",
    "it can be argued",
    "plays a crucial role",
    "a testament to",
    "in an ever-evolving",
]

# Apostrophe variants are folded to ASCII before matching
_APOSTROPHES = str.maketrans({"\u2019": "'", "\u2018": "'"})


class FormulaicPhrasesSignal(SignalExtractor):
    """Distinct curated phrases found (case-insensitive substring); 3+ saturates."""

    saturation = 3

    @property
    def name(self) -> SignalName:
        return SignalName.FORMULAIC_PHRASES

    def contribution(self, sample: TextSample) -> float:
        lower = sample.lower.translate(_APOSTROPHES)
        found = sum(1 for phrase in FORMULAIC_PHRASES if phrase in lower)
        return min(1.0, found / self.saturation)


PROMOTIONAL_PATTERNS = [
    # Calls to action
    re.compile(r"\bfollow (me )?for more\b", re.IGNORECASE),
    re.compile(r"\blink in (my )?bio\b", re.IGNORECASE),
    re.compile(r"\b(comment|drop) (below|a comment)\b", re.IGNORECASE),
    re.compile(r"\blet me know in the comments\b", re.IGNORECASE),
    re.compile(r"\b(like|repost|share) (and|&) (share|follow|comment)\b", re.IGNORECASE),
    re.compile(r"\brepost if\b", re.IGNORECASE),
    re.compile(r"\b(dm|message) me\b", re.IGNORECASE),
    re.compile(r"\b(sign up|register) (now|today|here)\b", re.IGNORECASE),
    re.compile(r"\bclick the link\b", re.IGNORECASE),
    re.compile(r"\b(agree|thoughts)\s*\?\s*$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"\bwhat do you think\s*\?", re.IGNORECASE),
    # Listicle openers
    re.compile(r"^\s*\d+\s+(ways|tips|things|lessons|reasons|mistakes|habits|steps)\b",
               re.IGNORECASE | re.MULTILINE),
    re.compile(r"\bhere (are|is) (the )?\d+\b", re.IGNORECASE),
    re.compile(r"\bhere'?s what i learned\b", re.IGNORECASE),
    re.compile(r"^\s*\d+[.)]\s+\S", re.MULTILINE),
    # Hustle / motivational phrasing
    re.compile(r"\b(hustle|grind) (culture|mode|hard)\b", re.IGNORECASE),
    re.compile(r"\b10x\b", re.IGNORECASE),
    re.compile(r"\blevel up\b", re.IGNORECASE),
    re.compile(r"\bconsistency is key\b", re.IGNORECASE),
    re.compile(r"\bnever give up\b", re.IGNORECASE),
    re.compile(r"\byour network is your net ?worth\b", re.IGNORECASE),
    re.compile(r"\bstop scrolling\b", re.IGNORECASE),
    re.compile(r"\bsuccess is(n't| not)? (a|about|never)\b", re.IGNORECASE),
    re.compile(r"\b(growth|winning) mindset\b", re.IGNORECASE),
    # Emoji bullets
    re.compile("^\\s*(?:\u27a1\ufe0f?|\u2705|\u2728|\U0001f449|\U0001f680|\U0001f4a1|\U0001f525)",
               re.MULTILINE),
]


class PromotionalPatternSignal(SignalExtractor):
    """Call-to-action, listicle and hustle phrasing; each match adds 0.3."""

    per_match = 0.3

    @property
    def name(self) -> SignalName:
        return SignalName.PROMOTIONAL_PATTERN

    def contribution(self, sample: TextSample) -> float:
        text = sample.text.translate(_APOSTROPHES)
        matches = sum(len(p.findall(text)) for p in PROMOTIONAL_PATTERNS)
        return min(1.0, self.per_match * matches)
