"""
Unit tests for the technique catalog.
"""
import pytest

from core.techniques import TECHNIQUES, get_technique


class TestCatalog:

    def test_order_and_keys(self):
        assert list(TECHNIQUES) == ["zero_shot", "few_shot", "chain_of_thought"]

    def test_example_titles(self):
        assert [e.title for e in get_technique("zero_shot").examples] == [
            "Text Classification",
            "Question Answering",
            "Language Translation",
            "Code Generation",
        ]
        assert [e.title for e in get_technique("few_shot").examples] == [
            "Sentiment Analysis",
            "Entity Extraction",
            "Code Completion",
            "Email Classification",
            "Creative Writing",
        ]
        assert [e.title for e in get_technique("chain_of_thought").examples] == [
            "Math Problem Solving",
            "Logical Reasoning",
            "Problem Decomposition",
            "Code Debugging",
            "Decision Making",
        ]

    def test_example_keys_unique_per_technique(self):
        for technique in TECHNIQUES.values():
            keys = [e.key for e in technique.examples]
            assert len(keys) == len(set(keys))

    def test_prompts_end_with_an_open_slot(self):
        # Each canned prompt leaves the answer for the model to fill in
        for technique in TECHNIQUES.values():
            for example in technique.examples:
                assert example.prompt.rstrip().endswith(":"), example.key

    def test_only_creative_writing_overrides_temperature(self):
        overriding = [
            (t.key, e.key, e.temperature)
            for t in TECHNIQUES.values()
            for e in t.examples
            if e.temperature is not None
        ]
        assert overriding == [("few_shot", "creative_writing", 0.8)]


class TestParamOverrides:

    def test_zero_shot_only_changes_temperature(self):
        assert get_technique("zero_shot").param_overrides() == {"temperature": 0.3}

    def test_few_shot(self):
        assert get_technique("few_shot").param_overrides() == {"temperature": 0.5, "max_tokens": 800}

    def test_chain_of_thought(self):
        assert get_technique("chain_of_thought").param_overrides() == {"temperature": 0.4, "max_tokens": 1000}


def test_unknown_technique_lists_available():
    with pytest.raises(KeyError) as exc_info:
        get_technique("one_shot")
    assert "zero_shot" in str(exc_info.value)
