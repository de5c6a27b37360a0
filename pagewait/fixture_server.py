"""Fixture web app for the asynchronous page scenarios.

Serves a character list that the page's own script loads and filters with
deliberate delays, so assertions race against DOM updates the same way they
do against a real single-page app.
"""

import argparse
import logging
import threading
from dataclasses import asdict, dataclass

from flask import Flask, jsonify, render_template, request
from werkzeug.serving import make_server

from .constants import (
    ALL_CLASSES_TITLE,
    FILTER_LOAD_MS,
    FILTER_START_MS,
    INITIAL_LOAD_MS,
    ROSTER,
)


@dataclass(frozen=True)
class FixtureTimings:
    initial_load_ms: int = INITIAL_LOAD_MS
    filter_start_ms: int = FILTER_START_MS
    filter_load_ms: int = FILTER_LOAD_MS


def create_app(roster=ROSTER, timings: FixtureTimings | None = None) -> Flask:
    timings = timings or FixtureTimings()
    roster = [dict(character) for character in roster]
    classes: list[str] = []
    for character in roster:
        if character["class"] not in classes:
            classes.append(character["class"])

    app = Flask(__name__)

    # --- Endpoints ------------------------------------------------------------

    @app.route("/")
    def index():
        return render_template(
            "fixture.html",
            classes=classes,
            timings=asdict(timings),
            all_classes_title=ALL_CLASSES_TITLE,
        )

    @app.route("/api/classes")
    def list_classes():
        return jsonify({"classes": classes})

    @app.route("/api/characters")
    def list_characters():
        wanted = request.args.get("class", "")
        if not wanted:
            return jsonify({"characters": roster})
        if wanted not in classes:
            return jsonify({"error": f"Unknown class: {wanted}"}), 404
        return jsonify(
            {"characters": [c for c in roster if c["class"] == wanted]}
        )

    return app


class FixtureServer:
    """Runs a Flask app on a background thread for the duration of a test session."""

    def __init__(self, app: Flask, host: str = "127.0.0.1", port: int = 0):
        self._app = app
        self._host = host
        self._port = port
        self._server = None
        self._thread: threading.Thread | None = None

    @property
    def url(self) -> str:
        if self._server is None:
            raise RuntimeError("Fixture server is not running")
        return f"http://{self._host}:{self._server.server_port}"

    def start(self) -> "FixtureServer":
        self._server = make_server(self._host, self._port, self._app, threaded=True)
        self._thread = threading.Thread(
            target=self._server.serve_forever, name="fixture-server", daemon=True
        )
        self._thread.start()
        logging.info(f"Fixture server listening on {self.url}")
        return self

    def stop(self) -> None:
        if self._server is not None:
            self._server.shutdown()
            self._server.server_close()
            self._server = None
        if self._thread is not None:
            self._thread.join(timeout=5)
            self._thread = None

    def __enter__(self) -> "FixtureServer":
        return self.start()

    def __exit__(self, *args) -> None:
        self.stop()


def main():
    parser = argparse.ArgumentParser(
        description="Serve the asynchronous character list fixture page."
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8080, help="Port to listen on")
    parser.add_argument(
        "--initial-load-ms",
        type=int,
        default=INITIAL_LOAD_MS,
        help="Delay before the page loads the full list",
    )
    parser.add_argument(
        "--filter-load-ms",
        type=int,
        default=FILTER_LOAD_MS,
        help="Time the page spends loading a filtered list",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    timings = FixtureTimings(
        initial_load_ms=args.initial_load_ms, filter_load_ms=args.filter_load_ms
    )
    logging.info(f"Starting fixture page on {args.host}:{args.port}")
    create_app(timings=timings).run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
