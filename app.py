from logging.config import dictConfig

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import Config
from utils.db import init_db_connection
from utils.media import CloudinaryUploader, configure_cloudinary

# Import controllers
from controllers.graphql_controller import graphql_bp
from controllers.health_controller import health_bp
from controllers.upload_controller import upload_bp


def configure_logging(level):
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {
            "format": "[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
        }},
        "handlers": {"wsgi": {
            "class": "logging.StreamHandler",
            "stream": "ext://flask.logging.wsgi_errors_stream",
            "formatter": "default",
        }},
        "root": {"level": level, "handlers": ["wsgi"]},
    })


def create_app(config_object=Config, store=None, uploader=None):
    """
    Build the Flask app. Tests pass their own store (a MongoStore over
    mongomock) and uploader; otherwise MongoDB and Cloudinary are set up
    from the configuration.
    """
    configure_logging(config_object.LOG_LEVEL)

    app = Flask(__name__)               # Initialize Flask app
    app.config.from_object(config_object)
    CORS(app)

    if store is None:
        store = init_db_connection(app)     # Initialize MongoDB connection
    if uploader is None:
        configure_cloudinary(app)
        uploader = CloudinaryUploader(folder=app.config["CLOUDINARY_FOLDER"])

    app.extensions["store"] = store
    app.extensions["uploader"] = uploader

    # Register Blueprint
    app.register_blueprint(health_bp)
    app.register_blueprint(graphql_bp)
    app.register_blueprint(upload_bp)

    # JSON bodies for every HTTP error instead of HTML pages
    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        body = {
            "success": False,
            "message": err.name,
            "errors": [{"field": "server", "message": err.description}],
        }
        return jsonify(body), err.code

    return app


# Run the app
if __name__ == "__main__":
    app = create_app()
    app.logger.info("Server running on port %s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])
