"""Unit tests for the built-in annotation rules and rule files."""

import json

import pytest

from codepages.core.config import PROJECT_ROOT
from codepages.interfaces.annotator import AnnotationRule, RuleFileError
from codepages.strategies.annotators import DEFAULT_RULES, annotate, load_rules, validate_rules
from codepages.strategies.highlighters import PygmentsHighlighter

PROFILE_SOURCE = """package main

func main() {
	me := Me{
		Email:          "rdominguez@tecnologer.net",
		Site:           "https://tecnologer.net",
		Experience:     ListExperience(),
		ContactOptions: ListContactOptions(),
	}
}
"""


# =============================================================================
# Default Rule Table Tests
# =============================================================================


class TestDefaultRules:
    """Test suite for DEFAULT_RULES."""

    def test_table_is_valid(self):
        """Test that every built-in pattern compiles with its replacement."""
        assert validate_rules(DEFAULT_RULES) == []

    def test_table_is_immutable(self):
        """Test that the table is a tuple of frozen rules."""
        assert isinstance(DEFAULT_RULES, tuple)
        with pytest.raises(AttributeError):
            DEFAULT_RULES[0].replacement = "x"

    def test_experience_link(self):
        """Test that the experience list call links to its page."""
        markup = (
            '<span class="nx">Experience</span><span class="p">:</span>'
            '<span class="w">     </span><span class="nx">ListExperience</span>'
            '<span class="p">(),</span>'
        )

        result = annotate(markup, DEFAULT_RULES)

        assert (
            '<span class="nx"><a href="experience.html" title="Expand experience list" '
            'class="nf">ListExperience</a></span>'
        ) in result

    def test_contact_link_with_bare_whitespace(self):
        """Test that the contact rule also accepts unwrapped whitespace."""
        markup = (
            '<span class="nx">ContactOptions</span><span class="p">:</span> '
            '<span class="nf">ListContactOptions</span>'
        )

        result = annotate(markup, DEFAULT_RULES)

        assert 'href="contact.html"' in result
        assert '<span class="nf"><a href="contact.html"' in result

    def test_email_link(self):
        """Test that the e-mail address becomes a mailto link."""
        result = annotate("write to rdominguez@tecnologer.net", DEFAULT_RULES)

        assert result == (
            'write to <a href="mailto:rdominguez@tecnologer.net" class="s">'
            "rdominguez@tecnologer.net</a>"
        )

    def test_email_dots_are_literal(self):
        """Test that the address only matches with real dots."""
        text = "write to rdominguez@tecnologerXnet"

        assert annotate(text, DEFAULT_RULES) == text

    def test_url_link_literal_quotes(self):
        """Test the URL rule on strings whose quotes are not escaped."""
        markup = '<span class="s">"https://tecnologer.net"</span>'

        result = annotate(markup, DEFAULT_RULES)

        assert result == (
            '<span class="s">"<a href="https://tecnologer.net" class="s">'
            'https://tecnologer.net</a>"</span>'
        )

    def test_url_link_numeric_entity(self):
        """Test the URL rule on quotes written as numeric entities."""
        markup = '<span class="s">&#34;https://tecnologer.net&#34;</span>'

        assert 'href="https://tecnologer.net"' in annotate(markup, DEFAULT_RULES)

    def test_url_stops_at_first_closing_quote(self):
        """Test that two URL strings on one line stay separate links."""
        markup = (
            '<span class="s">"https://a.example"</span>, '
            '<span class="s">"https://b.example"</span>'
        )

        result = annotate(markup, DEFAULT_RULES)

        assert 'href="https://a.example"' in result
        assert 'href="https://b.example"' in result

    def test_url_link(self):
        """Test that a quoted URL string becomes a link inside its span."""
        markup = '<span class="s">&quot;https://tecnologer.net&quot;</span>'

        result = annotate(markup, DEFAULT_RULES)

        assert result == (
            '<span class="s">&quot;<a href="https://tecnologer.net" class="s">'
            "https://tecnologer.net</a>&quot;</span>"
        )

    def test_plain_http_url_link(self):
        """Test that the optional 's' of the scheme is optional."""
        markup = '<span class="s">&quot;http://example.org&quot;</span>'

        assert 'href="http://example.org"' in annotate(markup, DEFAULT_RULES)

    def test_highlighted_profile(self):
        """Test the built-in rules against real Pygments output."""
        markup = PygmentsHighlighter(standalone=False).highlight(PROFILE_SOURCE, "go", "dracula")

        result = annotate(markup, DEFAULT_RULES)

        assert 'href="experience.html"' in result
        assert 'href="contact.html"' in result
        assert 'href="mailto:rdominguez@tecnologer.net"' in result
        assert 'href="https://tecnologer.net"' in result

    def test_default_profile_document(self):
        """Test the built-in rules against the shipped about/me.go."""
        source = (PROJECT_ROOT / "about" / "me.go").read_text(encoding="utf-8")
        markup = PygmentsHighlighter(standalone=False).highlight(source, "go", "dracula")

        result = annotate(markup, DEFAULT_RULES)

        assert 'href="experience.html"' in result
        assert 'href="contact.html"' in result
        assert '<a href="https://tecnologer.net" class="s">' in result
        assert 'href="mailto:rdominguez@tecnologer.net"' in result


# =============================================================================
# Rule File Tests
# =============================================================================


class TestLoadRules:
    """Test suite for load_rules."""

    def test_loads_rules_in_order(self, tmp_path):
        """Test that a valid file becomes a tuple of AnnotationRule."""
        path = tmp_path / "rules.json"
        path.write_text(
            json.dumps(
                [
                    {"patterns": ["(foo)", "(bar)"], "replacement": r"[\1]"},
                    {"patterns": ["(baz)"], "replacement": r"<\1>"},
                ]
            ),
            encoding="utf-8",
        )

        rules = load_rules(path)

        assert rules == (
            AnnotationRule(patterns=("(foo)", "(bar)"), replacement=r"[\1]"),
            AnnotationRule(patterns=("(baz)",), replacement=r"<\1>"),
        )

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises RuleFileError."""
        with pytest.raises(RuleFileError):
            load_rules(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises RuleFileError."""
        path = tmp_path / "rules.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(RuleFileError):
            load_rules(path)

    def test_rule_without_patterns(self, tmp_path):
        """Test that a rule must have at least one pattern."""
        path = tmp_path / "rules.json"
        path.write_text(json.dumps([{"patterns": [], "replacement": "x"}]), encoding="utf-8")

        with pytest.raises(RuleFileError):
            load_rules(path)

    def test_malformed_pattern_is_loaded(self, tmp_path):
        """Test that loading does not reject bad regexes; annotation skips them."""
        path = tmp_path / "rules.json"
        path.write_text(
            json.dumps([{"patterns": ["(", "(ok)"], "replacement": r"[\1]"}]),
            encoding="utf-8",
        )

        rules = load_rules(path)

        assert len(validate_rules(rules)) == 1
        assert annotate("ok", rules) == "[ok]"
