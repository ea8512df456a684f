import pytest

from synk.languages.spec import LanguageSpec


@pytest.fixture
def spec():
    return LanguageSpec(
        name="demo",
        keywords=("in", "int", "if", "println!", "z-index"),
        function_definers=("int",),
    )


def test_is_keyword_true_for_listed_words(spec):
    for word in spec.keywords:
        assert spec.is_keyword(word)


def test_is_keyword_false_for_other_words(spec):
    assert not spec.is_keyword("integer")
    assert not spec.is_keyword("")
    assert not spec.is_keyword("IF")


def test_pattern_prefers_longer_keyword(spec):
    match = spec.keyword_pattern().search("int x = 1;")
    assert match is not None
    assert match.group(1) == "int"


def test_pattern_requires_leading_word_boundary(spec):
    assert spec.keyword_pattern().search("xif") is None


def test_pattern_has_no_trailing_boundary(spec):
    match = spec.keyword_pattern().search("iffy")
    assert match is not None
    assert match.group(1) == "if"


def test_pattern_escapes_special_characters(spec):
    pattern = spec.keyword_pattern()
    assert pattern.search("println!(x)").group(1) == "println!"
    assert pattern.search("z-index: 3").group(1) == "z-index"
    assert pattern.search("printlnX") is None


def test_pattern_finds_all_keywords_in_order(spec):
    found = [m.group(1) for m in spec.keyword_pattern().finditer("if a in b int c")]
    assert found == ["if", "in", "int"]


def test_duplicates_are_removed_keeping_order():
    spec = LanguageSpec(name="dup", keywords=("b", "a", "b", "a"), function_definers=("a", "a"))
    assert spec.keywords == ("b", "a")
    assert spec.function_definers == ("a",)


def test_empty_keyword_rejected():
    with pytest.raises(ValueError):
        LanguageSpec(name="bad", keywords=("if", ""))


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        LanguageSpec(name="", keywords=("if",))


def test_spec_is_immutable(spec):
    with pytest.raises(AttributeError):
        spec.name = "other"
    assert spec.name == "demo"
    assert spec.keywords == ("in", "int", "if", "println!", "z-index")


def test_pattern_is_reused(spec):
    first = spec.keyword_pattern()
    second = spec.keyword_pattern()
    assert first is second
    assert second.search("x if y").group(1) == "if"