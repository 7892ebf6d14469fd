"""Tests for placeholder extraction and substitution."""

from flyer_studio.templates.placeholders import extract_placeholders, replace_placeholders


class TestExtractPlaceholders:
    """Tests for extract_placeholders."""

    def test_dedupes_in_first_seen_order(self):
        """Repeated names appear once, in order of first occurrence."""
        html = "<h1>{{A}}</h1><p>{{A}}</p><span>{{B}}</span>"
        assert extract_placeholders(html) == ["A", "B"]

    def test_no_tokens(self):
        """Markup without tokens yields an empty list."""
        assert extract_placeholders("<div>plain</div>") == []
        assert extract_placeholders("") == []

    def test_case_sensitive(self):
        """Names differing only in case are distinct."""
        assert extract_placeholders("{{Name}}{{NAME}}{{name}}") == ["Name", "NAME", "name"]

    def test_any_characters_except_closing_brace(self):
        """Names may contain spaces and punctuation, but not '}'."""
        html = "{{EVENT DATE}} {{price-$}} {{a.b}}"
        assert extract_placeholders(html) == ["EVENT DATE", "price-$", "a.b"]

    def test_malformed_tokens_are_not_rejected(self):
        """Unbalanced braces only yield what the pattern matches."""
        assert extract_placeholders("{{OPEN {{CLOSED}} }}") == ["OPEN {{CLOSED"]
        assert extract_placeholders("{{}} {{ONLY") == []

    def test_idempotent(self):
        """Extracting twice gives the same list."""
        html = "{{X}}{{Y}}{{X}}{{Z}}"
        assert extract_placeholders(html) == extract_placeholders(html) == ["X", "Y", "Z"]


class TestReplacePlaceholders:
    """Tests for replace_placeholders."""

    def test_replaces_all_occurrences(self):
        """Every occurrence of a token is substituted."""
        html = "<h1>{{A}}</h1><p>{{A}}</p>"
        assert replace_placeholders(html, {"A": "x"}) == "<h1>x</h1><p>x</p>"

    def test_leaves_unknown_tokens(self):
        """Tokens without a value stay in place."""
        assert replace_placeholders("{{A}}{{B}}", {"A": "1"}) == "1{{B}}"

    def test_none_and_empty_values(self):
        """None and empty values substitute an empty string."""
        assert replace_placeholders("[{{A}}][{{B}}]", {"A": None, "B": ""}) == "[][]"

    def test_keys_matched_literally(self):
        """Regex metacharacters in names are not interpreted."""
        html = "{{a.b}} {{a+b}} {{axb}}"
        assert replace_placeholders(html, {"a.b": "dot", "a+b": "plus"}) == "dot plus {{axb}}"

    def test_values_with_replacement_syntax(self):
        """Values containing '$1' or backslashes are inserted verbatim."""
        assert replace_placeholders("{{PRICE}}", {"PRICE": r"$1 \n"}) == r"$1 \n"

    def test_no_unresolved_tokens_after_full_substitution(self):
        """Filling every extracted name leaves no tokens behind."""
        html = "{{A}} and {{B}} and {{A}}"
        values = {name: "v" for name in extract_placeholders(html)}
        assert extract_placeholders(replace_placeholders(html, values)) == []
