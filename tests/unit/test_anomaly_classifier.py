import pytest

from dialog_localizer.anomaly.classifier import (
    classify,
    is_dlc,
    is_punctuation_mismatch,
    is_technical,
)
from dialog_localizer.anomaly.models import AnomalyTag


class TestClassify:
    @pytest.mark.parametrize("dest", [None, ""])
    def test_missing_dest(self, dest: str | None) -> None:
        assert classify("Hello there", dest) == {AnomalyTag.MISSING}

    def test_same_as_source(self) -> None:
        assert classify("Hello there", "Hello there") == {AnomalyTag.SAME}

    def test_clean_translation_has_no_tags(self) -> None:
        assert classify("Hello there", "Halo di sana") == set()

    def test_punctuation_mismatch(self) -> None:
        assert classify('He said "go"', "Dia bilang pergi") == {AnomalyTag.PUNCTUATION}

    def test_missing_excludes_same_and_punct(self) -> None:
        tags = classify('<Alias=Player> "x"', "")
        assert AnomalyTag.MISSING in tags
        assert AnomalyTag.SAME not in tags
        assert AnomalyTag.PUNCTUATION not in tags

    def test_same_excludes_punct(self) -> None:
        tags = classify('"quoted"', '"quoted"')
        assert tags == {AnomalyTag.SAME}

    def test_dlc_is_additive(self) -> None:
        tags = classify("DLC1 Vampire Lord", "")
        assert tags == {AnomalyTag.MISSING, AnomalyTag.DLC}

    def test_technical_is_additive(self) -> None:
        tags = classify("MaleEyes_01", "MaleEyes_01")
        assert tags == {AnomalyTag.SAME, AnomalyTag.TECHNICAL}

    def test_all_source_tags_with_punct(self) -> None:
        tags = classify("DLC2_<Id>", "DLC2_Id")
        assert tags == {AnomalyTag.PUNCTUATION, AnomalyTag.DLC, AnomalyTag.TECHNICAL}


class TestIsDlc:
    @pytest.mark.parametrize(
        "text",
        ["DLC01Quest", "DLC01 quest", "the dlc2 expansion", "Found in Dlc1Vampire", "DLC"],
    )
    def test_matches(self, text: str) -> None:
        assert is_dlc(text)

    @pytest.mark.parametrize("text", ["Ordinary Sentence", "Dawnguard", "dlc", "DL C1", ""])
    def test_does_not_match(self, text: str) -> None:
        assert not is_dlc(text)


class TestIsTechnical:
    @pytest.mark.parametrize(
        "text",
        ["FemaleHeadWoodElfVampire", "MaleEyes_01", "Npc7", "A_b", "ABC"],
    )
    def test_matches(self, text: str) -> None:
        assert is_technical(text)

    @pytest.mark.parametrize(
        "text",
        [
            "Hello world",
            "Male Eyes_01",
            "lowercase_id",
            "plain",
            "Whiterun",
            "",
            "123_456",
        ],
    )
    def test_does_not_match(self, text: str) -> None:
        assert not is_technical(text)


class TestIsPunctuationMismatch:
    def test_same_critical_characters(self) -> None:
        assert not is_punctuation_mismatch("<b>Hi</b>", "<b>Halo</b>")

    def test_other_punctuation_is_ignored(self) -> None:
        assert not is_punctuation_mismatch("Hello, friend!", "Halo teman")

    def test_order_matters(self) -> None:
        assert is_punctuation_mismatch('<"x">', '"<x>"')

    def test_missing_angle_bracket(self) -> None:
        assert is_punctuation_mismatch("<Alias=Player> waits", "Alias=Player menunggu")

    def test_empty_dest_is_not_a_mismatch(self) -> None:
        assert not is_punctuation_mismatch('"hi"', "")
