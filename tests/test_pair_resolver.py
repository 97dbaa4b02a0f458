"""Unit tests for geocoord.pair_resolver module."""

import pytest

from geocoord.outcome import CoordinateError, ErrorKind, Failure
from geocoord.pair_resolver import (
    PairSplitStrategy,
    parse_coordinate_pair,
    resolve_pair,
    split_pair,
    tokenize,
)


class TestTokenize:
    """Tests for whitespace/comma tokenization."""

    def test_mixed_separators(self) -> None:
        assert tokenize(" N45 30,15 ,W122  40 30 ") == ["N45", "30", "15", "W122", "40", "30"]

    def test_empty(self) -> None:
        assert tokenize("  ,, ") == []


class TestSplitPair:
    """Tests for MIDPOINT and DIRECTION splitting."""

    def test_midpoint_even(self) -> None:
        tokens = ["N45", "30", "15", "W122", "40", "30"]
        assert split_pair(tokens) == ("N45 30 15", "W122 40 30")

    def test_midpoint_odd_floors(self) -> None:
        tokens = ["N45", "30", "15", "W122", "40"]
        assert split_pair(tokens) == ("N45 30", "15 W122 40")

    def test_direction_leading_letters(self) -> None:
        tokens = ["N45", "30", "15", "W122", "40"]
        assert split_pair(tokens, PairSplitStrategy.DIRECTION) == ("N45 30 15", "W122 40")

    def test_direction_trailing_letters(self) -> None:
        tokens = ["45", "30", "15N", "122", "40W"]
        assert split_pair(tokens, PairSplitStrategy.DIRECTION) == ("45 30 15N", "122 40W")

    def test_direction_ignores_seconds_marker(self) -> None:
        tokens = ["45d30m15s", "N", "122d40m30s", "W"]
        assert split_pair(tokens, PairSplitStrategy.DIRECTION) == ("45d30m15s N", "122d40m30s W")

    def test_direction_falls_back_to_midpoint(self) -> None:
        tokens = ["45", "30", "122", "40"]
        assert split_pair(tokens, PairSplitStrategy.DIRECTION) == ("45 30", "122 40")


class TestParseCoordinatePair:
    """Tests for full pair parsing and cross-validation."""

    @pytest.mark.parametrize(
        "text",
        [
            "N45°30'15\" W122°40'30\"",
            "N453015 W1224030",
            "45°30'15\"N 122°40'30\"W",
            "N45 30 15 W122 40 30",
            "N45°30'15\", W122°40'30\"",
            "n45°30'15\" w122°40'30\"",
        ],
        ids=["symbols", "compact", "trailing", "whitespace", "comma", "lowercase"],
    )
    def test_portland(self, text: str) -> None:
        """Test every notation of the same point resolves identically."""
        coord = parse_coordinate_pair(text)

        assert f"{coord.latitude:.6f} {coord.longitude:.6f}" == "45.504167 -122.675000"

    def test_southern_eastern_signs(self) -> None:
        coord = parse_coordinate_pair("S33°52'07.68\" E151°12'33.48\"")

        assert coord.latitude == pytest.approx(-33.8688)
        assert coord.longitude == pytest.approx(151.2093)

    def test_compact_fraction_grammar(self) -> None:
        """Test loose grammar reading of compact tokens with a fraction."""
        coord = parse_coordinate_pair("N4530.25 W12240.5")

        assert coord.latitude == pytest.approx(45 + 3 / 60 + 0.25 / 3600)
        assert coord.longitude == pytest.approx(-(122 + 4 / 60 + 0.5 / 3600))

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"], ids=["empty", "spaces", "whitespace"])
    def test_empty_input(self, text: str) -> None:
        with pytest.raises(CoordinateError) as exc_info:
            parse_coordinate_pair(text)

        assert exc_info.value.kind is ErrorKind.EMPTY_INPUT
        assert exc_info.value.message == "Input cannot be empty."

    def test_single_token(self) -> None:
        with pytest.raises(CoordinateError) as exc_info:
            parse_coordinate_pair("N45°30'15\"")

        assert exc_info.value.kind is ErrorKind.MISSING_COMPONENT
        assert exc_info.value.message == "Input must include both latitude and longitude."

    def test_latitude_out_of_range(self) -> None:
        """Test 95°N passes the degrees bound but fails the latitude range."""
        with pytest.raises(CoordinateError) as exc_info:
            parse_coordinate_pair("95°00'00\"N 10°00'00\"E")

        assert exc_info.value.kind is ErrorKind.OUT_OF_RANGE
        assert exc_info.value.message.startswith("Latitude must be between -90 and 90")

    @pytest.mark.parametrize(
        "text,axis",
        [
            ("E45°00'00\" N10°00'00\"", "latitude"),
            ("N45°00'00\" S10°00'00\"", "longitude"),
        ],
        ids=["latitude-east", "longitude-south"],
    )
    def test_wrong_axis_direction(self, text: str, axis: str) -> None:
        with pytest.raises(CoordinateError) as exc_info:
            parse_coordinate_pair(text)

        assert exc_info.value.kind is ErrorKind.WRONG_AXIS_DIRECTION
        assert exc_info.value.message.startswith(f"Invalid {axis} direction")

    def test_unbalanced_halves_need_direction_split(self) -> None:
        """Test uneven token counts only resolve with the DIRECTION strategy."""
        text = "N45 30 15 W122 40"

        with pytest.raises(CoordinateError) as exc_info:
            parse_coordinate_pair(text)
        assert exc_info.value.kind is ErrorKind.UNRECOGNIZED_FORMAT

        coord = parse_coordinate_pair(text, PairSplitStrategy.DIRECTION)
        assert coord.latitude == pytest.approx(45.5041666667)
        assert coord.longitude == pytest.approx(-(122 + 40 / 60))

    def test_trailing_unbalanced_with_direction_split(self) -> None:
        coord = parse_coordinate_pair("45 30 15N 122 40W", PairSplitStrategy.DIRECTION)

        assert coord.latitude == pytest.approx(45.5041666667)
        assert coord.longitude == pytest.approx(-(122 + 40 / 60))


class TestResolvePair:
    """Tests for the outcome-returning wrapper."""

    def test_success(self) -> None:
        outcome = resolve_pair("N45°30'15\" W122°40'30\"")

        assert outcome.success
        assert outcome.data.longitude == pytest.approx(-122.675)

    def test_failure_is_not_raised(self) -> None:
        outcome = resolve_pair("95°00'00\"N 10°00'00\"E")

        assert isinstance(outcome, Failure)
        assert outcome.kind is ErrorKind.OUT_OF_RANGE
