import logging

from flask import Blueprint, current_app, jsonify, request

from utils.errors import AppError, FieldError
from utils.responses import failure

logger = logging.getLogger(__name__)

upload_bp = Blueprint("upload", __name__, url_prefix="/api")


# -------------------------------------------------------------
# UPLOAD PHOTO
# -------------------------------------------------------------
@upload_bp.route("/upload", methods=["POST"])
def upload_photo():
    photo = request.files.get("photo")
    if photo is None or not photo.filename:
        body = failure("No file uploaded", [FieldError("photo", "photo is required")])
        return jsonify(body), 400

    uploader = current_app.extensions["uploader"]
    try:
        url = uploader(photo.stream)
    except AppError as err:
        logger.warning("Photo upload rejected: %s", err)
        # The uploader reports against the employee field; this form calls it "photo"
        errors = [
            FieldError("photo" if e.field == "employee_photo" else e.field, e.message)
            for e in err.errors
        ]
        return jsonify(failure("Upload failed", errors)), 500
    except Exception as err:
        logger.exception("Photo upload failed")
        return jsonify(failure("Upload failed", [FieldError("server", str(err))])), 500

    return jsonify({"success": True, "url": url}), 200
