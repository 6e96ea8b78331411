# scan_books.py
import logging
import sys
from typing import Callable

from catalog import Catalog
from classifier import classify
from config import LOG_LEVEL
from models import InputKind
from providers import GoogleBooksProvider
from stores import BookStore


def handle_line(catalog: Catalog, raw: str, ask: Callable[[str], str] = input) -> None:
    """Route one scanned/typed line to the right catalog action and report the result."""
    c = classify(raw)

    if c.kind is InputKind.EMPTY:
        return
    if c.kind is InputKind.TOO_SHORT:
        print("Digite pelo menos 3 caracteres para buscar.")
        return

    if c.kind is InputKind.BARCODE:
        outcome = catalog.add_by_identifier(c.value)
    else:
        candidates = catalog.search(c.value)
        for i, book in enumerate(candidates, start=1):
            print(f"  {i}. {book.title} - {', '.join(book.authors)} {book.published_date}".rstrip())
        if not candidates:
            print("Nenhum resultado encontrado.")
        choice = ask(f"Número do livro, 'm' para salvar \"{c.value}\" manualmente, Enter para pular: ").strip().lower()

        if choice == "m":
            outcome = catalog.add_manual(c.value)
        elif choice.isdigit() and 1 <= int(choice) <= len(candidates):
            outcome = catalog.add_selected(candidates[int(choice) - 1])
        else:
            return

    if outcome.error:
        print(f"Erro: {outcome.error.message}")
    elif outcome.record.incomplete:
        print(f"Salvo como incompleto: {outcome.record.title}")
    else:
        print(f"Salvo: {outcome.record.title} (ISBN {outcome.record.isbn or '-'})")


def main(catalog: Catalog | None = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")

    if catalog is None:
        store = BookStore.default()
        catalog = Catalog(store, GoogleBooksProvider.from_config())
        print(f"Arquivo do catálogo: {store.path}")
    print("Pronto. Ctrl+C para sair.")

    try:
        while True:
            handle_line(catalog, input("Escaneie um código de barras ou digite um título: "))
    except (KeyboardInterrupt, EOFError):
        print("\nUser aborted program! Exiting.")
        return 0
    except Exception as e:
        print(f"\nAn error occured: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
