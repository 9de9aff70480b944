"""HTTP API serving greetings, table creation and Pokémon inserts."""

from __future__ import annotations

import argparse
import json
import sys
from enum import Enum
from pathlib import Path

from flask import Flask, Response, request, send_from_directory

from practiceapps.pokedb import POKEMON_TABLE, PokeBase


class MediaType(Enum):
    """Content types used by the API's responses."""

    JSON = "application/json"
    TEXT = "text/plain"
    HTML = "text/html"
    YAML = "text/yaml"


def _reply(body: str, media: MediaType | str, status: int = 200) -> Response:
    content_type = media.value if isinstance(media, MediaType) else media
    return Response(body, status=status, content_type=content_type)


def _require(body, key: str, kind: type):
    if not isinstance(body, dict):
        raise TypeError("request body must be a JSON object")
    value = body.get(key)
    if not isinstance(value, kind) or isinstance(value, bool):
        raise TypeError(f"field {key!r} must be of type {kind.__name__}")
    return value


def create_app(database: PokeBase, frontend_dir="frontend", docs_dir="docs") -> Flask:
    """Build the application with its routes bound to ``database``."""
    app = Flask(__name__)
    frontend = Path(frontend_dir).resolve()
    docs = Path(docs_dir).resolve()

    @app.get("/")
    def hello_world():
        return _reply("Hello from the learning API", MediaType.TEXT)

    @app.get("/hello")
    def json_content():
        name = request.args.get("name", "stranger")
        return _reply(json.dumps({"message": f"Hello, {name}"}, indent=4), MediaType.JSON)

    @app.get("/create-table")
    def create_table():
        if "name" not in request.args:
            return _reply("Missing 'name' parameters", MediaType.TEXT, 400)
        table_name = request.args["name"]
        try:
            database.init_table(table_name)
        except ValueError as error:
            return _reply(f"Error: {error}", MediaType.TEXT, 400)
        return _reply(f"Table {table_name} created sucessfully \n", MediaType.TEXT)

    @app.get("/add-pokemon")
    def add_pokemon():
        try:
            if not database.table_exists(POKEMON_TABLE):
                return _reply(
                    "Table 'pokemons' doesn't exists. Please create it first",
                    MediaType.TEXT,
                    400,
                )
            body = json.loads(request.get_data(as_text=True))
            name = _require(body, "name", str)
            kind = _require(body, "type", str)
            level = _require(body, "level", int)
            statement = database.prepare_statement()
            database.add_pokemon(statement, name, kind, level)
            return _reply(f"Pokemon {name} added successfully \n", MediaType.TEXT)
        except Exception as error:
            return _reply(f"Error: {error}", MediaType.TEXT, 400)

    @app.get("/docs")
    def docs_index():
        try:
            page = (frontend / "index.html").read_text(encoding="utf-8")
        except OSError:
            page = ""
        return _reply(page, MediaType.HTML)

    @app.get("/docs/static/<path:filename>")
    def docs_static(filename: str):
        return send_from_directory(frontend, filename)

    @app.get("/openapi.yaml")
    def openapi():
        try:
            spec = (docs / "openapi.yaml").read_text(encoding="utf-8")
        except OSError:
            return _reply("Failed to open openapi.yaml", "text/plain", 500)
        return _reply(spec, MediaType.YAML)

    return app


def main(argv=None) -> int:
    """Serve the API."""
    parser = argparse.ArgumentParser(description="Serve the Pokémon API.")
    parser.add_argument("--database", default="pokedb.sqlite3")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--frontend-dir", default="frontend")
    parser.add_argument("--docs-dir", default="docs")
    args = parser.parse_args(argv)

    database = PokeBase(args.database, "default", "normal", 1)
    app = create_app(database, args.frontend_dir, args.docs_dir)
    print(f"Server running on http://localhost:{args.port}")
    try:
        app.run(host=args.host, port=args.port, threaded=False)
    finally:
        database.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())