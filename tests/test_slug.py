import re

from portfolio.services.slug_utils import slugify


def test_basic_title():
    assert slugify("Hello, World!") == "hello-world"


def test_accents_are_folded_to_ascii():
    assert slugify("Café Déjà Vu") == "cafe-deja-vu"


def test_runs_of_separators_collapse_and_edges_are_trimmed():
    assert slugify("  --Rust  &  Python-- ") == "rust-python"


def test_cyrillic_title_is_transliterated():
    assert slugify("Привет мир") == "privet-mir"


def test_hangul_title_gives_url_safe_slug():
    slug = slugify("포트폴리오")
    assert slug
    assert re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", slug)


def test_symbol_only_titles_get_distinct_non_empty_slugs():
    first, second = slugify("!!!"), slugify("!!!")
    assert first.startswith("untitled-")
    assert first != second


def test_digits_are_kept():
    assert slugify("Top 10 Tips for 2024") == "top-10-tips-for-2024"
