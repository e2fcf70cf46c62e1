import logging

from flask import Flask
from config import Config
from routes.frame_blur import bp as frame_blur_bp


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO),
        format=app.config["LOG_FORMAT"],
    )

    # blueprints
    app.register_blueprint(frame_blur_bp)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
