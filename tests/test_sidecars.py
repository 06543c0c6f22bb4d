"""
Unit tests for captions, product.docx, ai.txt and thumbnail readers
"""

import os

from docx import Document

from src.ingestion.sidecars import (
    extract_docx_text,
    find_thumbnail,
    load_captions,
    parse_captions_file,
    read_ai_context,
)


def test_parse_captions_file(tmp_path):
    """Test filename|caption|description lines"""
    captions = tmp_path / "captions.txt"
    captions.write_text(
        "front.jpg|Front view|Shows the logo\n"
        "side.jpg|Side view\n"
        "\n"
        "no-separator-line\n"
        "back.jpg||Only a description\n",
        encoding="utf-8",
    )

    result = parse_captions_file(str(captions))

    assert result["front.jpg"] == {"caption": "Front view", "description": "Shows the logo"}
    assert result["side.jpg"] == {"caption": "Side view", "description": None}
    assert result["back.jpg"] == {"caption": None, "description": "Only a description"}
    assert "no-separator-line" not in result
    assert len(result) == 3


def test_parse_captions_file_missing(tmp_path):
    assert parse_captions_file(str(tmp_path / "nope.txt")) == {}


def test_load_captions_first_existing_wins(tmp_path):
    """Test that the first captions file found is used, the rest ignored"""
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    second.write_text("x.jpg|From second\n", encoding="utf-8")
    assert load_captions(str(first), str(second)) == {"x.jpg": {"caption": "From second", "description": None}}

    first.write_text("y.jpg|From first\n", encoding="utf-8")
    assert list(load_captions(str(first), str(second))) == ["y.jpg"]


def test_extract_docx_text_paragraphs_and_tables(tmp_path):
    """Test that paragraphs and table rows are both extracted"""
    doc = Document()
    doc.add_paragraph("A sturdy widget.")
    doc.add_paragraph("   ")
    doc.add_paragraph("Made of steel.")
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Weight"
    table.cell(0, 1).text = "2 kg"
    table.cell(1, 0).text = "Color"
    table.cell(1, 1).text = "Red"
    path = tmp_path / "product.docx"
    doc.save(str(path))

    text = extract_docx_text(str(path))

    assert text.splitlines() == ["A sturdy widget.", "Made of steel.", "Weight | 2 kg", "Color | Red"]


def test_extract_docx_text_broken_file(tmp_path):
    """Test that a corrupt docx reads as no description"""
    path = tmp_path / "product.docx"
    path.write_bytes(b"not a zip file")
    assert extract_docx_text(str(path)) == ""
    assert extract_docx_text(str(tmp_path / "missing.docx")) == ""


def test_read_ai_context(tmp_path):
    path = tmp_path / "ai.txt"
    assert read_ai_context(str(path)) is None
    path.write_text("  \n", encoding="utf-8")
    assert read_ai_context(str(path)) is None
    path.write_text("Warranty: 2 years\n", encoding="utf-8")
    assert read_ai_context(str(path)) == "Warranty: 2 years"


def test_find_thumbnail_prefers_png(tmp_path):
    """Test thumbnail lookup order and absolute paths"""
    assert find_thumbnail(str(tmp_path)) is None
    (tmp_path / "thumb.jpg").write_bytes(b"jpg")
    assert find_thumbnail(str(tmp_path)) == os.path.abspath(tmp_path / "thumb.jpg")
    (tmp_path / "thumb.png").write_bytes(b"png")
    assert find_thumbnail(str(tmp_path)) == os.path.abspath(tmp_path / "thumb.png")
