"""Tests for detection/fusion.py: weighting, confidence and labels."""

import pytest

from common.errors import DetectorError
from common.models import Label
from detection.fusion import fuse, fused_score, heuristic_confidence, score_to_label
from detection.judgment import PROVIDER_OPENROUTER, ProviderConfig
from detection.types import HeuristicScore, ModelScore

CONFIGURED = ProviderConfig(provider=PROVIDER_OPENROUTER, model="m", api_key="k")
NONE = ProviderConfig()


class TestFusionWithModel:
    def test_boundary_case(self):
        result = fuse(HeuristicScore(5), ModelScore(9, 0.8), CONFIGURED)
        assert result.score == 7
        assert result.label is Label.LIKELY_AI
        assert result.display_label == "likely_ai"
        assert result.confidence > 0.5
        assert result.model_score == 9
        assert result.heuristic_score == 5

    def test_confidence_formula(self):
        result = fuse(HeuristicScore(5), ModelScore(9, 0.8), CONFIGURED)
        assert result.confidence == pytest.approx(0.86)

    def test_confidence_capped_at_one(self):
        result = fuse(HeuristicScore(5), ModelScore(9, 1.0), CONFIGURED)
        assert result.confidence == pytest.approx(1.0)

    @pytest.mark.parametrize("model,heuristic,expected", [
        (9, 5, 7),
        (4, 3, 4),
        (1, 8, 4),
        (2, 5, 3),
        (7, 2, 5),
        (9, 10, 9),
        (0, 0, 0),
        (10, 10, 10),
    ])
    def test_fused_score_rounding(self, model, heuristic, expected):
        assert fused_score(model, heuristic) == expected

    def test_model_score_without_provider_rejected(self):
        with pytest.raises(DetectorError):
            fuse(HeuristicScore(5), ModelScore(9, 0.8), NONE)

    def test_signals_carried(self):
        heuristic = HeuristicScore(8, fired_signals=("dash_usage", "ai_vocabulary"))
        result = fuse(heuristic, ModelScore(8, 0.5), CONFIGURED)
        assert result.fired_signals == ("dash_usage", "ai_vocabulary")


class TestHeuristicsOnly:
    def test_cap(self):
        result = fuse(HeuristicScore(9), None, CONFIGURED)
        assert result.score == 9
        assert result.label is Label.AI
        assert result.confidence <= 0.5
        assert result.model_score is None
        assert result.to_dict()['breakdown']['llm_score'] is None

    def test_cap_with_many_signals(self):
        heuristic = HeuristicScore(10, fired_signals=tuple(f"s{i}" for i in range(10)))
        assert heuristic_confidence(heuristic) == pytest.approx(0.5)

    def test_neutral_confidence(self):
        assert heuristic_confidence(HeuristicScore(5)) == pytest.approx(0.3)

    def test_failed_model_falls_back(self):
        # Port failure on a configured provider is fused as heuristics-only
        result = fuse(HeuristicScore(4), None, CONFIGURED)
        assert result.heuristics_only
        assert result.display_label == "uncertain"

    def test_mixed_shown_as_uncertain(self):
        result = fuse(HeuristicScore(5), None, NONE)
        assert result.label is Label.MIXED
        assert result.to_dict()['label'] == "uncertain"

    def test_other_bands_keep_label(self):
        assert fuse(HeuristicScore(2), None, NONE).to_dict()['label'] == "human"
        assert fuse(HeuristicScore(7), None, NONE).to_dict()['label'] == "likely_ai"


class TestScoreToLabel:
    @pytest.mark.parametrize("score,label", [
        (0, Label.HUMAN),
        (3, Label.HUMAN),
        (4, Label.MIXED),
        (5, Label.MIXED),
        (6, Label.LIKELY_AI),
        (7, Label.LIKELY_AI),
        (8, Label.AI),
        (10, Label.AI),
    ])
    def test_boundaries(self, score, label):
        assert score_to_label(score) is label

    def test_mixed_with_model_stays_mixed(self):
        result = fuse(HeuristicScore(5), ModelScore(5, 0.9), CONFIGURED)
        assert result.score == 5
        assert result.to_dict()['label'] == "mixed"


class TestResultShape:
    def test_to_dict(self):
        heuristic = HeuristicScore(6, fired_signals=("dash_usage",))
        payload = fuse(heuristic, ModelScore(8, 0.5), CONFIGURED).to_dict()
        assert payload == {
            'score': 7,
            'confidence': pytest.approx(0.65),
            'label': 'likely_ai',
            'breakdown': {
                'llm_score': 8,
                'heuristic_score': 6,
                'signals': ['dash_usage'],
            },
        }
