"""Flask web app - list, create, edit and delete journal entries."""

import logging
from datetime import date

from flask import Flask, jsonify, redirect, render_template, request, url_for

from .config import Config
from .core.entries import EntryType
from .core.errors import NotFoundError, ValidationError
from .ports.entry_store import EntryStore
from .workflows import create_from_form, edit_from_form, list_weeks

logger = logging.getLogger(__name__)


def _wants_json() -> bool:
    return request.accept_mimetypes.best == "application/json"


def create_app(store: EntryStore, config: Config | None = None) -> Flask:
    """Build the web app around an explicitly constructed store."""
    config = config or Config()
    app = Flask(__name__)

    def render_index(error: ValidationError | None = None, form=None, status: int = 200):
        weeks = list_weeks(store, config)
        html = render_template(
            "index.html",
            weeks=weeks,
            entry_types=list(EntryType),
            today=date.today().isoformat(),
            error=error,
            form=form or {},
        )
        return html, status

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        logger.info(f"{request.method} {request.path}: {e}")
        if _wants_json():
            return jsonify({"error": str(e)}), 404
        return render_template("not_found.html", error=e), 404

    @app.get("/")
    def index():
        return render_index()

    @app.get("/entries")
    def entries():
        return render_index()

    @app.post("/")
    def create():
        try:
            entry = create_from_form(store, request.form)
        except ValidationError as e:
            logger.info(f"Rejected new entry: {e}")
            if _wants_json():
                return jsonify({"error": str(e), "fields": e.fields}), 400
            return render_index(error=e, form=request.form, status=400)

        if _wants_json():
            return jsonify(entry.to_dict()), 201
        return redirect(url_for("index"), code=303)

    @app.get("/entries/<int:entry_id>/edit")
    def edit(entry_id: int):
        entry = store.get_entry(entry_id)
        form = {"date": entry.date.isoformat(), "type": entry.type.value, "text": entry.text}
        return render_template("edit.html", entry_id=entry.id, form=form, entry_types=list(EntryType))

    @app.post("/entries/<int:entry_id>/edit")
    def save(entry_id: int):
        try:
            edit_from_form(store, entry_id, request.form)
        except ValidationError as e:
            logger.info(f"Rejected edit of entry {entry_id}: {e}")
            return (
                render_template(
                    "edit.html",
                    entry_id=entry_id,
                    form=request.form,
                    entry_types=list(EntryType),
                    error=e,
                ),
                400,
            )
        return redirect(url_for("entries"), code=303)

    @app.get("/api/weeks")
    def api_weeks():
        return jsonify([week.to_dict() for week in list_weeks(store, config)])

    return app
