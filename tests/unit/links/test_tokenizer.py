import pytest

from ldpsuite.links import split_links


class TestSplitLinks:
    def test_keeps_comma_inside_uri_reference(self) -> None:
        value = (
            '<http://example.com/a>; rel="next", '
            '<http://example.com/b,c>; rel="prev"'
        )

        result = split_links(value)

        assert result == [
            '<http://example.com/a>; rel="next"',
            '<http://example.com/b,c>; rel="prev"',
        ]

    def test_single_link_value(self) -> None:
        assert split_links('<http://example.com/>; rel="type"') == [
            '<http://example.com/>; rel="type"'
        ]

    def test_trims_whitespace_around_values(self) -> None:
        assert split_links("  <a> ,   <b>  ") == ["<a>", "<b>"]

    def test_empty_value_gives_one_empty_element(self) -> None:
        assert split_links("") == [""]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("<a>,", ["<a>", ""]),
            (",<a>", ["", "<a>"]),
            ("<a>,,<b>", ["<a>", "", "<b>"]),
        ],
    )
    def test_keeps_empty_elements(self, value: str, expected: list[str]) -> None:
        assert split_links(value) == expected

    def test_unmatched_open_bracket_swallows_rest(self) -> None:
        assert split_links("<http://example.com/a, <b>") == [
            "<http://example.com/a, <b>"
        ]

    def test_comma_in_parameter_splits(self) -> None:
        # Quoted parameters are not tracked, only URI references.
        assert split_links('<a>; title="x,y"') == ['<a>; title="x', 'y"']
