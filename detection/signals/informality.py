"""Human informality markers (the only signal that pushes toward human)."""

import re

from detection.protocols import SignalExtractor
from detection.types import SignalName, TextSample

SLANG = frozenset({
    "lol", "lmao", "lmfao", "rofl", "tbh", "fr", "smh", "ngl", "idk", "imo",
    "imho", "omg", "btw", "brb", "irl", "af", "rn", "fyi", "wtf", "ikr",
    "gonna", "wanna", "gotta", "kinda", "sorta", "ya", "yall", "y'all", "bro",
    "dude", "haha", "hahaha", "lmk", "nvm", "tho", "cuz", "u", "ur", "pls",
    "plz", "ok", "okay", "yeah", "nah", "yep", "nope", "meh", "ugh",
})

# Contractions typed without the apostrophe
BARE_CONTRACTIONS = frozenset({
    "cant", "dont", "wont", "im", "ive", "didnt", "doesnt", "isnt", "wasnt",
    "arent", "couldnt", "shouldnt", "wouldnt", "thats", "theyre", "youre",
    "whats", "hes", "shes",
})

_REPEATED_PUNCT_RE = re.compile(r"[!?]{2,}")
_ELLIPSIS_RE = re.compile(r"\.{3,}|\u2026")
_EMOTICON_RE = re.compile(r"(?:^|\s)(?:[:;]-?[()DPp]|xD|XD|<3|:'\()(?=\s|$)")
_STRETCHED_WORD_RE = re.compile(r"\b[a-z]*([a-z])\1{2,}[a-z]*\b")


class HumanInformalitySignal(SignalExtractor):
    """
    Counts casual markers; three or more saturate at -1.

    Slang tokens, bare contractions, repeated !!/??, emoticons and stretched
    words ("sooo") count 1 each; ellipses count 0.5.
    """

    saturation = 3.0

    @property
    def name(self) -> SignalName:
        return SignalName.HUMAN_INFORMALITY

    def contribution(self, sample: TextSample) -> float:
        markers = 0.0
        for word in sample.words:
            if word in SLANG or word in BARE_CONTRACTIONS:
                markers += 1
        markers += len(_REPEATED_PUNCT_RE.findall(sample.text))
        markers += len(_EMOTICON_RE.findall(sample.text))
        markers += len(_STRETCHED_WORD_RE.findall(sample.lower))
        markers += 0.5 * len(_ELLIPSIS_RE.findall(sample.text))
        return -min(1.0, markers / self.saturation)
