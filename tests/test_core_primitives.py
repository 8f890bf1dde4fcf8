"""
Tests for the core primitives.

Tests cover:
- Duration table lookups and the dotted-note ratio
- Formulaic pitch resolution
- Lookup-table pitch resolution
"""

from fractions import Fraction

import pytest

from style_builder.core import (
    DURATION_TABLE,
    FormulaicPitchResolver,
    LookupPitchResolver,
    PitchMode,
    duration_code,
    lookup_duration,
    pitch_resolver_for,
)
from style_builder.errors import BuildError, UnknownDurationError, UnknownPitchError


class TestDurationTable:
    """Tests for the duration table."""

    def test_quarter_is_one(self) -> None:
        """A quarter note lasts one time unit."""
        assert DURATION_TABLE["4"] == 1

    def test_table_values(self) -> None:
        """Every code has its expected length."""
        assert DURATION_TABLE["2"] == 2
        assert DURATION_TABLE["4."] == Fraction(3, 2)
        assert DURATION_TABLE["8"] == Fraction(1, 2)
        assert DURATION_TABLE["8."] == Fraction(3, 4)
        assert DURATION_TABLE["16"] == Fraction(1, 4)

    def test_dotted_ratio(self) -> None:
        """Dotted codes are 1.5x their undotted counterpart."""
        assert DURATION_TABLE["4."] == 1.5 * DURATION_TABLE["4"]
        assert DURATION_TABLE["8."] == 1.5 * DURATION_TABLE["8"]

    def test_table_is_read_only(self) -> None:
        """The table can't be modified at runtime."""
        with pytest.raises(TypeError):
            DURATION_TABLE["32"] = Fraction(1, 8)  # type: ignore[index]

    def test_lookup_accepts_yaml_integers(self) -> None:
        """An unquoted YAML duration arrives as an int."""
        assert lookup_duration(8) == Fraction(1, 2)
        assert lookup_duration("8.") == Fraction(3, 4)

    def test_unknown_duration(self) -> None:
        """Unknown codes are fatal."""
        with pytest.raises(UnknownDurationError, match="32"):
            lookup_duration("32")

    def test_unquoted_dotted_code_is_rejected(self) -> None:
        """An unquoted 4. parses as a float and is not a code."""
        assert duration_code(4.0) == "4.0"
        with pytest.raises(UnknownDurationError):
            lookup_duration(4.0)

    def test_bool_is_not_a_code(self) -> None:
        """True must not sneak through as '1'."""
        with pytest.raises(UnknownDurationError):
            lookup_duration(True)

    def test_error_is_build_error(self) -> None:
        """Duration errors share the build error base."""
        with pytest.raises(BuildError):
            lookup_duration("1")


class TestFormulaicPitch:
    """Tests for arithmetic pitch resolution."""

    @pytest.fixture
    def resolver(self) -> FormulaicPitchResolver:
        return FormulaicPitchResolver()

    def test_middle_octave(self, resolver: FormulaicPitchResolver) -> None:
        """c4, e4 and g4 land around middle C."""
        assert resolver.resolve("c4") == 60
        assert resolver.resolve("e4") == 64
        assert resolver.resolve("g4") == 67

    def test_octaves(self, resolver: FormulaicPitchResolver) -> None:
        """Each octave digit moves twelve semitones."""
        assert resolver.resolve("c0") == 12
        assert resolver.resolve("c3") == 48
        assert resolver.resolve("g9") == 127

    @pytest.mark.parametrize("token", ["d4", "f4", "a4", "b4", "C4"])
    def test_unsupported_letters(self, resolver: FormulaicPitchResolver, token: str) -> None:
        """Only c, e and g are known letters."""
        with pytest.raises(UnknownPitchError):
            resolver.resolve(token)

    @pytest.mark.parametrize("token", ["c#4", "eb4", "gs4"])
    def test_accidentals_rejected(self, resolver: FormulaicPitchResolver, token: str) -> None:
        """No accidental is supported."""
        with pytest.raises(UnknownPitchError):
            resolver.resolve(token)

    @pytest.mark.parametrize("token", ["", "4", "c", "cx"])
    def test_malformed_tokens(self, resolver: FormulaicPitchResolver, token: str) -> None:
        """Tokens without a letter or octave digit fail."""
        with pytest.raises(UnknownPitchError):
            resolver.resolve(token)

    def test_mode(self, resolver: FormulaicPitchResolver) -> None:
        assert resolver.mode == PitchMode.FORMULAIC


class TestLookupPitch:
    """Tests for pitch-map resolution."""

    def test_lookup(self) -> None:
        """Tokens are looked up verbatim."""
        resolver = LookupPitchResolver({"dum": 36, "tak": 38})
        assert resolver.resolve("dum") == 36
        assert resolver.resolve("tak") == 38

    def test_miss(self) -> None:
        """A token missing from the map is fatal."""
        resolver = LookupPitchResolver({"dum": 36})
        with pytest.raises(UnknownPitchError, match="'ka'"):
            resolver.resolve("ka")

    def test_no_formula_fallback(self) -> None:
        """A percussion map never falls back to letter arithmetic."""
        resolver = LookupPitchResolver({"dum": 36})
        with pytest.raises(UnknownPitchError):
            resolver.resolve("c4")

    def test_map_is_verbatim(self) -> None:
        """A map may redefine formulaic-looking tokens."""
        resolver = LookupPitchResolver({"c4": 42})
        assert resolver.resolve("c4") == 42


class TestPitchResolverFor:
    """Tests for strategy selection."""

    def test_pitch_map_selects_lookup(self) -> None:
        resolver = pitch_resolver_for({"x": 36})
        assert isinstance(resolver, LookupPitchResolver)
        assert resolver.mode == PitchMode.LOOKUP

    def test_empty_pitch_map_is_still_lookup(self) -> None:
        """Presence, not contents, decides."""
        assert isinstance(pitch_resolver_for({}), LookupPitchResolver)

    def test_no_pitch_map_selects_formula(self) -> None:
        assert isinstance(pitch_resolver_for(None), FormulaicPitchResolver)

    def test_lookup_copies_map(self) -> None:
        """Later changes to the source dict don't leak in."""
        source = {"x": 36}
        resolver = pitch_resolver_for(source)
        source["x"] = 99
        assert resolver.resolve("x") == 36
