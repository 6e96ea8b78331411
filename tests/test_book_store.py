"""Tests for the JSON record store."""
import json

from models import BookRecord
from stores import BookStore


def test_first_load_creates_empty_document(tmp_path):
    store = BookStore(tmp_path / "nested" / "books.json")

    assert store.load() == []
    assert json.loads(store.path.read_text(encoding="utf-8")) == []


def test_save_then_load_keeps_order_and_fields(store):
    books = [
        BookRecord(title="Dune", isbn="9780441172719", authors=["Frank Herbert"], page_count=412,
                   categories=["Fiction"], added_at="2026-01-01T00:00:02+00:00"),
        BookRecord.placeholder("Notas", isbn="").stamped("2026-01-01T00:00:01+00:00"),
    ]
    store.save(books)

    assert store.load() == books
    on_disk = json.loads(store.path.read_text(encoding="utf-8"))
    assert on_disk[0]["pageCount"] == 412
    assert on_disk[1]["incomplete"] is True
    assert not store.path.with_suffix(".json.tmp").exists()


def test_corrupt_document_reads_as_empty(store):
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text("{not json", encoding="utf-8")

    assert store.load() == []


def test_legacy_portuguese_fields_are_read(store):
    store.path.write_text(json.dumps([{
        "isbn": "8535914846",
        "titulo": "Dom Casmurro",
        "autores": ["Machado de Assis"],
        "editora": "Companhia das Letras",
        "paginas": 256,
        "capa": "http://example.com/c.jpg",
        "categorias": ["Ficção", "Ficção"],
        "incompleto": False,
        "dataAdicionado": "2024-05-01T10:00:00.000Z",
    }]), encoding="utf-8")

    [book] = store.load()
    assert book.title == "Dom Casmurro"
    assert book.authors == ["Machado de Assis"]
    assert book.page_count == 256
    assert book.cover_url == "http://example.com/c.jpg"
    assert book.categories == ["Ficção"]
    assert book.added_at == "2024-05-01T10:00:00.000Z"


def test_missing_authors_default_to_unknown():
    assert BookRecord.from_dict({"title": "X", "authors": []}).authors == ["Unknown"]
