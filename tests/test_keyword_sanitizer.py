from app.services.keyword_sanitizer import sanitize_keywords, split_comma_list


def test_sanitize_keywords_empty_input():
    """Absent, empty and whitespace-only input yield no keywords."""
    assert sanitize_keywords(None) == []
    assert sanitize_keywords("") == []
    assert sanitize_keywords("   ") == []
    assert sanitize_keywords(" , ,, ") == []


def test_sanitize_keywords_trims_and_keeps_order():
    """Segments are trimmed, blanks dropped and order preserved."""
    keywords = sanitize_keywords("  Python , , asyncio,  Web Scraping ")

    assert keywords == ["Python", "asyncio", "Web Scraping"]


def test_sanitize_keywords_caps_at_ten():
    """Only the first ten non-empty segments are kept."""
    raw = ",".join(f"kw{i}" for i in range(14))

    keywords = sanitize_keywords(raw)

    assert len(keywords) == 10
    assert keywords == [f"kw{i}" for i in range(10)]


def test_sanitize_keywords_keeps_duplicates_and_case():
    """No uniqueness or case folding happens at this stage."""
    assert sanitize_keywords("Go, go, Go") == ["Go", "go", "Go"]


def test_split_comma_list_honours_limit():
    """The shared splitter applies whatever limit it is given."""
    raw = ",".join(str(i) for i in range(20))

    assert len(split_comma_list(raw, 15)) == 15
    assert split_comma_list("a,b", 15) == ["a", "b"]
