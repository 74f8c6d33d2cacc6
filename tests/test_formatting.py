"""Tests for address display formatting."""

from routematch.address.formatting import format_address, format_single_line


class TestFormatAddress:
    """Test format_address()."""

    def test_scanned(self):
        result = format_address(
            {"street": "28175 Haggerty Road", "city": "Novi", "state": "mi", "zip": "48377"}
        )
        assert result == ("28175 HAGGERTY ROAD", "NOVI, MI 48377")

    def test_stored_uses_first_segment(self):
        result = format_address(
            {
                "legal_address": "123 Main St, Detroit, MI 48201",
                "city": "Detroit",
                "state": "MI",
                "zip": "48201",
            }
        )
        assert result == ("123 MAIN ST", "DETROIT, MI 48201")

    def test_missing_state_shows_zip_only(self):
        result = format_address({"street": "1 A St", "city": "Troy", "zip": "48083"})
        assert result == ("1 A ST", "48083")

    def test_free_form(self):
        assert format_address("123 Main St, Detroit, MI 48201") == (
            "123 MAIN ST",
            "DETROIT, MI 48201",
        )
        assert format_address(" 123 main st ") == ("123 MAIN ST", "")

    def test_absent(self):
        assert format_address(None) == ("", "")
        assert format_address({}) == ("", "")


class TestFormatSingleLine:
    """Test format_single_line()."""

    def test_joined(self):
        result = format_single_line(
            {"street": "456 Oak Ave", "city": "Novi", "state": "MI", "zip": "48377"}
        )
        assert result == "456 OAK AVE, NOVI, MI 48377"

    def test_single_line_only(self):
        assert format_single_line("9 Elm Ct") == "9 ELM CT"
        assert format_single_line(None) == ""
