"""Tests for the terminal scanning loop."""
from conftest import make_book
from scan_books import handle_line, main


def _never_ask(prompt):
    raise AssertionError("no prompt expected")


def test_barcode_goes_straight_to_isbn_lookup(catalog, provider, store, capsys):
    handle_line(catalog, "9780134190440", ask=_never_ask)

    assert provider.isbn_calls == ["9780134190440"]
    assert store.load()[0].incomplete is True
    assert "incompleto" in capsys.readouterr().out


def test_title_pick_saves_candidate(catalog, provider, store):
    provider.by_text = [make_book("Dune", isbn="9780441172719"), make_book("Dune Messiah")]

    handle_line(catalog, "dune", ask=lambda prompt: "2")

    assert [b.title for b in store.load()] == ["Dune Messiah"]


def test_title_manual_choice(catalog, store):
    handle_line(catalog, "Caderno azul", ask=lambda prompt: "m")

    [book] = store.load()
    assert book.title == "Caderno azul"
    assert book.incomplete is True


def test_skip_and_short_input(catalog, store, capsys):
    handle_line(catalog, "dune", ask=lambda prompt: "")
    handle_line(catalog, "ab", ask=_never_ask)
    handle_line(catalog, "   ", ask=_never_ask)

    assert store.load() == []
    assert "3 caracteres" in capsys.readouterr().out


def test_duplicate_is_reported(catalog, capsys):
    handle_line(catalog, "0000000000", ask=_never_ask)
    handle_line(catalog, "0000000000", ask=_never_ask)

    assert "Livro já cadastrado" in capsys.readouterr().out


def test_main_exits_cleanly_on_end_of_input(catalog, monkeypatch, capsys):
    lines = iter(["0000000000"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    assert main(catalog) == 0
    assert "Exiting" in capsys.readouterr().out
    assert catalog.list_books()[0].title == "ISBN: 0000000000"


def test_main_exits_cleanly_on_ctrl_c(catalog, monkeypatch):
    def interrupt(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)

    assert main(catalog) == 0
