"""
Property-based tests using Hypothesis.

Documents are generated from the INI grammar (sections, properties with
every literal kind, blank lines and comments) alongside arbitrary text, and
the parser's invariants are checked across all of them.
"""

from __future__ import annotations

import io

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from spanini.core.parser import parse

PRINTABLE = "".join(chr(c) for c in range(0x20, 0x7F))

identifiers = st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,8}", fullmatch=True)
bare_words = identifiers.filter(lambda word: word.lower() not in ("true", "false"))
spacing = st.sampled_from(["", " ", "  ", "\t"])
comments = st.text(alphabet=PRINTABLE, max_size=20).map(lambda body: "#" + body)


@st.composite
def number_literals(draw: st.DrawFn) -> str:
    sign = draw(st.sampled_from(["", "+", "-"]))
    integral = draw(st.text(alphabet="0123456789", max_size=5))
    fraction = draw(st.none() | st.text(alphabet="0123456789", max_size=5))
    assume(integral or fraction)
    if fraction is None:
        return sign + integral
    return f"{sign}{integral}.{fraction}"


@st.composite
def boolean_literals(draw: st.DrawFn) -> tuple[str, bool]:
    word = draw(st.sampled_from(["true", "false"]))
    cased = "".join(c.upper() if draw(st.booleans()) else c for c in word)
    return cased, word == "true"


@st.composite
def values(draw: st.DrawFn) -> tuple[str, object]:
    """A value literal as written and the Python value it should decode to."""
    kind = draw(st.sampled_from(["number", "string", "boolean", "bare"]))
    if kind == "number":
        literal = draw(number_literals())
        return literal, float(literal)
    if kind == "string":
        body = draw(st.text(alphabet=PRINTABLE.replace('"', ""), max_size=20))
        return f'"{body}"', body
    if kind == "boolean":
        return draw(boolean_literals())
    word = draw(bare_words)
    return word, word


@st.composite
def property_lines(draw: st.DrawFn) -> tuple[str, str, object]:
    key = draw(identifiers)
    literal, expected = draw(values())
    line = f"{draw(spacing)}{key}{draw(spacing)}={draw(spacing)}{literal}{draw(spacing)}"
    if draw(st.booleans()):
        line += " " + draw(comments)
    return line, key, expected


@st.composite
def documents(draw: st.DrawFn) -> tuple[str, list[tuple[str, str, object]], int]:
    """
    A well-formed document, the events it should produce and its number of
    property lines.
    """
    lines: list[str] = []
    events: list[tuple[str, str, object]] = []
    property_count = 0
    for _ in range(draw(st.integers(min_value=0, max_value=5))):
        section = draw(identifiers)
        lines.append(f"{draw(spacing)}[{draw(spacing)}{section}{draw(spacing)}]{draw(spacing)}")
        for _ in range(draw(st.integers(min_value=0, max_value=6))):
            filler = draw(st.sampled_from(["property", "property", "blank", "comment"]))
            if filler == "blank":
                lines.append(draw(spacing))
            elif filler == "comment":
                lines.append(draw(comments))
            else:
                line, key, expected = draw(property_lines())
                lines.append(line)
                events.append((section, key, expected))
                property_count += 1
    text = "".join(line + "\n" for line in lines)
    return text, events, property_count


def run_parse(text: str) -> tuple[bool, list[tuple[str, str, object]], str]:
    events: list[tuple[str, str, object]] = []
    diagnostics = io.StringIO()

    def on_property(state, section, key, value):
        state.append((section.text, key.text, value.to_python()))

    ok = parse(text, events, on_property, diagnostics=diagnostics)
    return ok, events, diagnostics.getvalue()


# =============================================================================
# Grammar-generated documents
# =============================================================================


class TestDocumentProperties:
    """Property-based tests over documents built from the grammar."""

    @given(documents())
    @settings(max_examples=200)
    def test_one_callback_per_property_line(self, document) -> None:
        """Invariant: callback count equals the number of key = value lines."""
        text, _, property_count = document
        ok, events, diagnostics = run_parse(text)
        assert ok, diagnostics
        assert len(events) == property_count

    @given(documents())
    @settings(max_examples=200)
    def test_events_use_nearest_preceding_section(self, document) -> None:
        """Invariant: each event carries the header closest above its line."""
        text, expected, _ = document
        ok, events, _ = run_parse(text)
        assert ok
        assert [(section, key) for section, key, _ in events] == [
            (section, key) for section, key, _ in expected
        ]

    @given(documents())
    @settings(max_examples=200)
    def test_values_decode_to_written_literals(self, document) -> None:
        """Invariant: every value arrives as the literal it was written as."""
        text, expected, _ = document
        ok, events, _ = run_parse(text)
        assert ok
        assert events == expected

    @given(property_lines(), documents())
    @settings(max_examples=100)
    def test_property_before_any_section_fails(self, leading, document) -> None:
        """Invariant: a property above the first header fails with no events."""
        line, _, _ = leading
        text, _, _ = document
        ok, events, diagnostics = run_parse(line + "\n" + text)
        assert not ok
        assert events == []
        assert diagnostics.startswith("Syntax error on line 1\n")


class TestNumberProperties:
    """Property-based tests for number literals."""

    @given(number_literals())
    @settings(max_examples=300)
    def test_number_literal_round_trips(self, literal: str) -> None:
        """Invariant: a number value decodes to float() of its literal text."""
        ok, events, _ = run_parse(f"[s]\nk = {literal}\n")
        assert ok
        assert events == [("s", "k", float(literal))]

    @given(st.sampled_from(["+", "-", ".", "+.", "-."]))
    def test_sign_or_dot_alone_is_not_a_number(self, literal: str) -> None:
        """Invariant: a sign or dot without digits never parses as a value."""
        ok, events, _ = run_parse(f"[s]\nk = {literal}\n")
        assert not ok
        assert events == []


# =============================================================================
# Arbitrary input
# =============================================================================


class TestArbitraryInputProperties:
    """Property-based tests over text that need not follow the grammar."""

    @given(st.text(min_size=0, max_size=500))
    @settings(max_examples=300)
    def test_parse_never_raises(self, text: str) -> None:
        """Invariant: parse returns a bool for any str and never raises."""
        ok, _, _ = run_parse(text)
        assert isinstance(ok, bool)

    @given(st.text(alphabet="[]=#\"\n \t.+-aZ09", min_size=0, max_size=200))
    @settings(max_examples=300)
    def test_failure_reports_exactly_one_diagnostic(self, text: str) -> None:
        """Invariant: failure writes one headline plus one line of text; success writes nothing."""
        ok, _, diagnostics = run_parse(text)
        if ok:
            assert diagnostics == ""
            return
        headline, _, snippet = diagnostics.partition("\n")
        assert headline.startswith("Syntax error on line ")
        line = int(headline.removeprefix("Syntax error on line "))
        assert 1 <= line <= text.count("\n") + 1
        assert snippet.endswith("\n")
        assert snippet.count("\n") == 1
        assert snippet[:-1] in text

    @given(st.text(min_size=0, max_size=300))
    @settings(max_examples=200)
    def test_spans_point_into_the_buffer(self, text: str) -> None:
        """Invariant: delivered section and key spans alias the caller's buffer."""
        seen: list = []
        parse(text, seen, lambda state, s, k, v: state.append((s, k)), diagnostics=io.StringIO())
        for section, key in seen:
            assert section.buffer is text
            assert key.buffer is text
            assert section.end <= key.start
