from core.i18n import Bilingual, bilingual_field, localize


def test_select_hebrew_and_fallback_to_english():
    text = Bilingual(he="שלום", en="hello")
    assert text.select("he") == "שלום"
    assert text.select("en") == "hello"
    assert text.select("fr") == "hello"
    assert text.select(None) == "hello"


def test_bilingual_field_reads_suffixed_columns():
    row = {"title_he": "כותרת", "title_en": "Title"}
    assert bilingual_field(row, "title") == Bilingual(he="כותרת", en="Title")


def test_localize_replaces_pairs_with_single_field():
    row = {"id": 3, "title_he": "כותרת", "title_en": "Title", "body_he": "גוף", "body_en": "Body"}
    out = localize(row, "he", "title", "body")
    assert out == {"id": 3, "title": "כותרת", "body": "גוף"}
    assert "title_he" in row
