import pytest

from dialog_localizer.glossary.matcher import GlossaryMatcher, unmask_text
from dialog_localizer.glossary.models import GlossaryTerm


class TestBuild:
    def test_lookup_is_keyed_by_lowercase_term(self, matcher: GlossaryMatcher) -> None:
        info = matcher.lookup["whiterun"]
        assert info.id == "a1"
        assert info.category == "Location"

    def test_placeholder_cache_maps_tokens_to_terms(self, matcher: GlossaryMatcher) -> None:
        assert matcher.placeholder_cache["[Location_a1]"] == "Whiterun"
        assert matcher.placeholder_cache["[Name_u1]"] == "Ulfric Stormcloak"

    def test_len_counts_terms(self, matcher: GlossaryMatcher) -> None:
        assert len(matcher) == 5

    def test_lookup_is_read_only(self, matcher: GlossaryMatcher) -> None:
        with pytest.raises(TypeError):
            matcher.lookup["new"] = matcher.lookup["whiterun"]  # type: ignore[index]

    def test_empty_terms_are_ignored(self) -> None:
        m = GlossaryMatcher([GlossaryTerm(id="e1", term="", category="Term")])
        assert len(m) == 0
        assert m.mask("nothing here") == "nothing here"


class TestMask:
    def test_replaces_term_with_placeholder(self, matcher: GlossaryMatcher) -> None:
        assert (
            matcher.mask("Welcome to Whiterun, traveler.")
            == "Welcome to [Location_a1], traveler."
        )

    def test_longest_match_wins(self, matcher: GlossaryMatcher) -> None:
        assert matcher.mask("I visited Skyrim Hold today") == "I visited [Location_s2] today"

    def test_shorter_term_still_matches_alone(self, matcher: GlossaryMatcher) -> None:
        assert matcher.mask("Skyrim belongs to the Nords") == "[Location_s1] belongs to the Nords"

    def test_respects_word_boundaries(self, matcher: GlossaryMatcher) -> None:
        assert matcher.mask("Whiterunners") == "Whiterunners"

    def test_is_case_insensitive(self, matcher: GlossaryMatcher) -> None:
        assert matcher.mask("WHITERUN guards") == "[Location_a1] guards"

    def test_replaces_every_occurrence(self, matcher: GlossaryMatcher) -> None:
        assert (
            matcher.mask("Whiterun, whiterun, Whiterun!")
            == "[Location_a1], [Location_a1], [Location_a1]!"
        )

    def test_multi_word_term_inside_sentence(self, matcher: GlossaryMatcher) -> None:
        assert (
            matcher.mask("Ulfric Stormcloak leads the Stormcloaks")
            == "[Name_u1] leads the [Faction_f1]"
        )

    def test_empty_text_unchanged(self, matcher: GlossaryMatcher) -> None:
        assert matcher.mask("") == ""

    def test_text_without_terms_unchanged(self, matcher: GlossaryMatcher) -> None:
        assert matcher.mask("Nothing to see here.") == "Nothing to see here."

    def test_empty_glossary_is_identity(self) -> None:
        m = GlossaryMatcher([])
        assert m.mask("Welcome to Whiterun") == "Welcome to Whiterun"

    def test_regex_metacharacters_are_literal(self) -> None:
        m = GlossaryMatcher([GlossaryTerm(id="t1", term="St. Alessia", category="Name")])
        assert m.mask("Praise St. Alessia!") == "Praise [Name_t1]!"
        assert m.mask("Praise StX Alessia!") == "Praise StX Alessia!"

    def test_term_with_alternation_character_does_not_break_pattern(self) -> None:
        m = GlossaryMatcher(
            [
                GlossaryTerm(id="p1", term="Fire|Ice", category="Spell"),
                GlossaryTerm(id="p2", term="Frost", category="Spell"),
            ]
        )
        assert m.mask("Cast Fire|Ice now") == "Cast [Spell_p1] now"
        assert m.mask("Cast Fire now") == "Cast Fire now"
        assert m.mask("Cast Frost now") == "Cast [Spell_p2] now"


class TestIsTerm:
    def test_whole_text_term(self, matcher: GlossaryMatcher) -> None:
        assert matcher.is_term("whiterun")

    def test_sentence_containing_term(self, matcher: GlossaryMatcher) -> None:
        assert not matcher.is_term("Whiterun gate")


class TestUnmask:
    def test_restores_known_placeholder(self, matcher: GlossaryMatcher) -> None:
        assert matcher.unmask("Selamat datang di [Location_a1].") == "Selamat datang di Whiterun."

    def test_unknown_placeholder_is_kept(self, matcher: GlossaryMatcher) -> None:
        assert matcher.unmask("Go to [Location_zz9]") == "Go to [Location_zz9]"

    def test_token_outside_grammar_is_kept(self, matcher: GlossaryMatcher) -> None:
        assert matcher.unmask("Go to [Location_A1]") == "Go to [Location_A1]"

    def test_is_idempotent(self, matcher: GlossaryMatcher) -> None:
        text = "[Location_a1] and [Name_u1] and [Item_nope]"
        once = matcher.unmask(text)
        assert matcher.unmask(once) == once

    def test_empty_text(self, matcher: GlossaryMatcher) -> None:
        assert matcher.unmask("") == ""

    def test_pre_existing_bracket_text_is_treated_as_placeholder(
        self, matcher: GlossaryMatcher
    ) -> None:
        # Known limitation: literal text in placeholder form cannot be told apart.
        assert matcher.unmask("Literal [Location_a1] text") == "Literal Whiterun text"

    def test_unmask_text_with_plain_mapping(self) -> None:
        assert unmask_text("[Race_k9] warrior", {"[Race_k9]": "Nord"}) == "Nord warrior"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "Welcome to Whiterun, traveler.",
            "Ulfric Stormcloak leads the Stormcloaks out of Skyrim Hold.",
            "Skyrim is cold. Skyrim Hold is colder.",
            "No glossary words in this line.",
            "",
        ],
    )
    def test_unmask_reverses_mask(self, matcher: GlossaryMatcher, text: str) -> None:
        assert matcher.unmask(matcher.mask(text)) == text

    def test_end_to_end_with_translation_step(self) -> None:
        m = GlossaryMatcher([GlossaryTerm(id="a1", term="Whiterun", category="Location")])
        masked = m.mask("Welcome to Whiterun, traveler.")
        assert masked == "Welcome to [Location_a1], traveler."

        translated = masked.replace("Welcome to", "Selamat datang di").replace(
            "traveler", "pengembara"
        )
        assert m.unmask(translated) == "Selamat datang di Whiterun, pengembara."
