import logging
from typing import Optional

from flask import Flask, Response, jsonify, render_template, request
from flask_cors import CORS

from config import get_allowed_origins
from domain.renderer import render_cells
from services.frame_renderer import FrameRenderer
from services.game_loop import GameLoop


def create_app(loop: Optional[GameLoop] = None) -> Flask:
    """
    Build the Flask app around a GameLoop.

    The loop is not started here; the caller owns its lifetime. Request
    handlers only read the current snapshot or enqueue commands on the loop.
    """
    app = Flask(__name__)
    game_loop = loop or GameLoop()
    frame_renderer = FrameRenderer()
    app.config["GAME_LOOP"] = game_loop

    # Enable CORS for API routes so a separately hosted page can call Flask
    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    CORS(app, resources={r"/api/*": {"origins": get_allowed_origins()}})

    @app.route("/", methods=["GET"])
    def index():
        state = game_loop.state
        return render_template("index.html", grid_size=state.size)

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """
        Current snapshot of the game.

        Returns the entities plus ``cells``: a flat list of grid_size²
        markers (null, "player", "food", "snake") indexed by y * grid_size + x.
        """
        try:
            state = game_loop.state
            payload = state.to_dict()
            payload["cells"] = render_cells(state)
            return jsonify(payload)

        except Exception as error:
            logging.error(f"Error building game state: {error}")
            return jsonify({"error": "Failed to load game state"}), 500

    @app.route("/api/board", methods=["GET"])
    def get_board():
        try:
            return Response(game_loop.state.print_board(), mimetype="text/plain")

        except Exception as error:
            logging.error(f"Error rendering board: {error}")
            return jsonify({"error": "Failed to render board"}), 500

    @app.route("/api/frame.png", methods=["GET"])
    def get_frame():
        try:
            png = frame_renderer.to_png_bytes(game_loop.state)
            return Response(png, mimetype="image/png")

        except Exception as error:
            logging.error(f"Error rendering frame: {error}")
            return jsonify({"error": "Failed to render frame"}), 500

    @app.route("/api/input", methods=["POST"])
    def post_input():
        """
        Queue a key press.

        Body: {"key": "<KeyboardEvent.key>"}. Non-directional keys are
        accepted and ignored by the engine.
        """
        data = request.get_json(silent=True) or {}
        key = data.get("key")
        if not isinstance(key, str) or not key:
            return jsonify({"error": "Request body must include a 'key' string"}), 400

        game_loop.press_key(key)
        return jsonify({"queued": True}), 202

    @app.route("/api/reset", methods=["POST"])
    def post_reset():
        game_loop.request_reset()
        return jsonify({"queued": True}), 202

    return app


if __name__ == "__main__":
    from main import main

    main(["serve"])
