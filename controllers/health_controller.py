from flask import Blueprint, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/")
def index():
    return jsonify({"status": "ok", "message": "Employee management API is running"})
