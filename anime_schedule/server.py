"""Simple Flask server for the anime schedule page."""

import asyncio
from typing import Optional

from flask import Flask, Response, jsonify, send_from_directory

from .constants.paths import STATIC_DIR
from .models.config import ScheduleConfig
from .processors.orchestrator import build_schedule


def create_app(config: Optional[ScheduleConfig] = None) -> Flask:
    """Create the Flask app serving the schedule page."""
    app = Flask(__name__, static_folder=None)
    app.config["SCHEDULE_CONFIG"] = config or ScheduleConfig()

    def schedule_config() -> ScheduleConfig:
        return app.config["SCHEDULE_CONFIG"]

    @app.route("/static/<path:filename>")
    def serve_static(filename: str) -> Response:
        """Serve static files (CSS, etc.)."""
        return send_from_directory(STATIC_DIR, filename)

    @app.route("/")
    def index() -> str:
        """Fetch every configured title and render the page."""
        _, document = asyncio.run(build_schedule(schedule_config()))
        return document.to_html()

    @app.route("/api/schedule")
    def schedule() -> Response:
        """Fetch every configured title and return the records as JSON."""
        result, _ = asyncio.run(build_schedule(schedule_config()))
        return jsonify(result.model_dump())

    return app


def run_server(
    host: str = "0.0.0.0",
    port: int = 3000,
    debug: bool = True,
    config: Optional[ScheduleConfig] = None,
) -> None:
    """Run the Flask development server."""
    print(f"\nAnime schedule running at http://localhost:{port}/\n")
    create_app(config).run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    run_server()
