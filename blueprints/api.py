from flask import Blueprint, jsonify, request

from catalog import Catalog, Outcome
from providers import GoogleBooksProvider
from stores import BookStore

bp = Blueprint("api", __name__, url_prefix="/api")
catalog = Catalog(BookStore.default(), GoogleBooksProvider.from_config())


def _respond(outcome: Outcome):
    if outcome.error:
        return jsonify({"erro": outcome.error.message}), outcome.error.status_code
    return jsonify(outcome.record.to_dict()), 200


@bp.get("/livros")
def books_list():
    return jsonify([b.to_dict() for b in catalog.list_books()]), 200


@bp.post("/livros/isbn")
def books_add_isbn():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    isbn = str(payload.get("isbn") or "").strip()
    if not isbn:
        return jsonify({"erro": "ISBN é obrigatório"}), 400

    return _respond(catalog.add_by_identifier(isbn))


@bp.get("/buscar")
def books_search():
    q = (request.args.get("q") or "").strip()
    if not q:
        return jsonify({"erro": "Termo de busca é obrigatório"}), 400

    return jsonify([b.to_dict() for b in catalog.search(q)]), 200


@bp.post("/livros/adicionar")
def books_add_selected():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"erro": "Dados do livro são obrigatórios"}), 400

    return _respond(catalog.add_selected(payload))


@bp.post("/livros/manual")
def books_add_manual():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    title = payload.get("titulo") or payload.get("title") or ""
    return _respond(catalog.add_manual(str(title)))


@bp.delete("/livros/<index>")
def books_remove(index: str):
    try:
        position = int(index)
    except ValueError:
        return jsonify({"erro": "Livro não encontrado"}), 404

    outcome = catalog.remove(position)
    if outcome.error:
        return jsonify({"erro": outcome.error.message}), outcome.error.status_code
    return jsonify({"sucesso": True}), 200
