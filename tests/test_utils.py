from universal.utils import filter_entities, recursive_filter_entities
from universal.utils import clear_tags, find_list, join_fragments, has_markup


class TestFilterEntities:
    def test_mojibake_emdash(self):
        assert filter_entities("â\u0080\u0094") == "—"

    def test_mojibake_right_single_quote(self):
        assert filter_entities("Lilithâ\u0080\u0099s Wings") == "Lilith’s Wings"

    def test_cp1252_emdash(self):
        assert filter_entities("Phase 1 â€” Blood") == "Phase 1 — Blood"

    def test_cp1252_left_double_quote(self):
        assert filter_entities("â€œ") == "“"

    def test_amp_entity(self):
        assert filter_entities("Tips &amp; Tricks") == "Tips & Tricks"

    def test_nbsp_c2a0(self):
        assert filter_entities("a\u00c2\u00a0b") == "a b"

    def test_nbsp_a0(self):
        assert filter_entities("a\u00a0b") == "a b"

    def test_newline_normalization(self):
        assert filter_entities("line one\nline two") == "line one line two"

    def test_runs_of_whitespace_collapse(self):
        assert filter_entities("  Level: 100 \t HP: ~24,000,000  ") == "Level: 100 HP: ~24,000,000"


class TestRecursiveFilterEntities:
    def test_nested_dict(self):
        data = {"a": "â\u0080\u0094", "b": {"c": "â\u0080\u0093"}}
        recursive_filter_entities(data)
        assert data == {"a": "—", "b": {"c": "–"}}

    def test_nested_list(self):
        data = ["â\u0080\u0094", ["â\u0080\u0093"]]
        recursive_filter_entities(data)
        assert data == ["—", ["–"]]

    def test_does_not_normalize_newlines(self):
        data = {"text": "line one\nline two"}
        recursive_filter_entities(data)
        assert data["text"] == "line one\nline two"

    def test_non_string_values_unchanged(self):
        data = {"level": 100, "flag": True, "empty": None}
        recursive_filter_entities(data)
        assert data == {"level": 100, "flag": True, "empty": None}


class TestClearTags:
    def test_unwraps_listed_tags(self):
        assert clear_tags("<i>Blood Orbs</i> explode", ["i"]) == "Blood Orbs explode"

    def test_keeps_unlisted_tags(self):
        assert clear_tags("<b>Fissure</b> <i>x</i>", ["i"]) == "<b>Fissure</b> x"


class TestSmallHelpers:
    def test_find_list_returns_first_hit(self):
        assert find_list("Ground Slam and Fissure", ["Fissure", "Ground Slam"]) == "Fissure"

    def test_find_list_no_hit(self):
        assert find_list("Overview", ["Fissure"]) is False

    def test_join_fragments_drops_empty(self):
        assert join_fragments(["a", "", "b", None]) == "a b"

    def test_has_markup(self):
        assert has_markup("<b>bold</b>")
        assert not has_markup("HP < 50% and > 10%")
