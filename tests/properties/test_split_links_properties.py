from hypothesis import given, strategies as st

from ldpsuite.links import parse_link_value, split_links

# URI characters, commas included, but never angle brackets.
uri_text = st.text(
    alphabet=st.characters(
        whitelist_categories=["L", "Nd"], whitelist_characters=":/?#.,;=&-_~"
    ),
    min_size=1,
    max_size=30,
)
rel_token = st.from_regex(r"[a-z][a-z0-9.-]{0,10}", fullmatch=True)


@given(targets=st.lists(uri_text, min_size=1, max_size=6), rel=rel_token)
def test_split_yields_one_element_per_link(targets: list[str], rel: str) -> None:
    value = ", ".join(f'<{target}>; rel="{rel}"' for target in targets)

    result = split_links(value)

    assert len(result) == len(targets)
    assert [parse_link_value(link).uri for link in result] == [
        target.strip() for target in targets
    ]


@given(value=st.text(max_size=60))
def test_split_is_never_empty(value: str) -> None:
    assert len(split_links(value)) >= 1


@given(value=st.text(alphabet=st.characters(blacklist_characters="<>"), max_size=60))
def test_without_brackets_split_matches_comma_split(value: str) -> None:
    assert split_links(value) == [part.strip() for part in value.split(",")]


@given(value=st.text(max_size=60))
def test_elements_are_trimmed(value: str) -> None:
    for element in split_links(value):
        assert element == element.strip()


@given(value=st.text(max_size=60))
def test_rejoined_elements_split_the_same_way(value: str) -> None:
    elements = split_links(value)

    assert split_links(", ".join(elements)) == elements
