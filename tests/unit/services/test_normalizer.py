"""Unit tests for the provider response normalizer."""

from __future__ import annotations

import json

import pytest

from app.services.sentiment.normalizer import normalize
from app.services.sentiment.types import ProviderKind, SentimentResult


def _body(value: object) -> str:
    return json.dumps(value)


class TestHuggingFace:
    """Flat and nested classification arrays."""

    def test_picks_highest_score(self):
        body = _body([{"label": "positive", "score": 0.2}, {"label": "negative", "score": 0.9}])
        assert normalize(ProviderKind.HUGGINGFACE, body) == SentimentResult("negative", 0.9)

    def test_nested_list_falls_back_to_first_inner_list(self):
        body = _body([[{"label": "neutral", "score": 0.5}]])
        assert normalize(ProviderKind.HUGGINGFACE, body) == SentimentResult("neutral", 0.5)

    def test_nested_uses_only_first_input(self):
        body = _body(
            [
                [{"label": "neutral", "score": 0.5}, {"label": "joy", "score": 0.4}],
                [{"label": "anger", "score": 0.99}],
            ]
        )
        assert normalize(ProviderKind.HUGGINGFACE, body) == SentimentResult("neutral", 0.5)

    def test_ties_keep_first_entry(self):
        body = _body([{"label": "first", "score": 0.5}, {"label": "second", "score": 0.5}])
        assert normalize(ProviderKind.HUGGINGFACE, body).label == "first"

    def test_bytes_body_accepted(self):
        body = _body([{"label": "positive", "score": 0.7}]).encode()
        assert normalize(ProviderKind.HUGGINGFACE, body) == SentimentResult("positive", 0.7)

    @pytest.mark.parametrize(
        "body",
        [
            '{"error": "Model is loading"}',
            "not json",
            "",
            "[]",
            "[[]]",
        ],
    )
    def test_unrecognized_shapes_yield_empty_result(self, body):
        result = normalize(ProviderKind.HUGGINGFACE, body)
        assert result.is_empty


class TestHFSpace:
    """Gradio `data` arrays of strings, objects, or [label, score] pairs."""

    def test_plain_string_entry(self):
        assert normalize(ProviderKind.HF_SPACE, _body({"data": ["joy"]})) == SentimentResult(
            "joy", None
        )

    def test_label_score_pair(self):
        result = normalize(ProviderKind.HF_SPACE, _body({"data": [["anger", 0.77]]}))
        assert result == SentimentResult("anger", 0.77)

    def test_object_entry(self):
        body = _body({"data": [{"label": "POSITIVE", "score": 0.91, "confidences": []}]})
        assert normalize(ProviderKind.HF_SPACE, body) == SentimentResult("POSITIVE", 0.91)

    def test_skips_entries_without_label(self):
        body = _body({"data": [{"score": 0.3}, "", [0.5], None, "sad"]})
        assert normalize(ProviderKind.HF_SPACE, body) == SentimentResult("sad", None)

    def test_stops_at_first_labelled_entry(self):
        body = _body({"data": [["calm", 0.6], ["angry", 0.9]]})
        assert normalize(ProviderKind.HF_SPACE, body).label == "calm"

    def test_non_numeric_score_ignored(self):
        body = _body({"data": [["calm", "high"]]})
        assert normalize(ProviderKind.HF_SPACE, body) == SentimentResult("calm", None)

    @pytest.mark.parametrize("body", ['{"data": []}', '{"result": "joy"}', '["joy"]', "oops"])
    def test_unrecognized_shapes_yield_empty_result(self, body):
        assert normalize(ProviderKind.HF_SPACE, body).is_empty


class TestCustom:
    """Flat {label, score} objects."""

    def test_reads_label_and_score(self):
        body = _body({"label": "positive", "score": 0.81, "model": "v2"})
        assert normalize(ProviderKind.CUSTOM, body) == SentimentResult("positive", 0.81)

    def test_missing_score(self):
        assert normalize(ProviderKind.CUSTOM, _body({"label": "meh"})) == SentimentResult("meh")

    @pytest.mark.parametrize("body", ["[1, 2]", "nope", '{"label": ["x"]}'])
    def test_unrecognized_shapes_yield_empty_result(self, body):
        assert normalize(ProviderKind.CUSTOM, body).is_empty

    def test_numeric_label_keeps_score(self):
        body = _body({"label": 1, "score": 0.5})
        assert normalize(ProviderKind.CUSTOM, body) == SentimentResult("1", 0.5)

    def test_numeric_string_score(self):
        body = _body({"label": "negative", "score": "0.25"})
        assert normalize(ProviderKind.CUSTOM, body) == SentimentResult("negative", 0.25)

    def test_bad_score_does_not_drop_label(self):
        body = _body({"label": "neutral", "score": "high"})
        assert normalize(ProviderKind.CUSTOM, body) == SentimentResult("neutral")
