from ariadne import graphql_sync, make_executable_schema
from ariadne.explorer import ExplorerGraphiQL
from flask import Blueprint, current_app, jsonify, request

# Resolver modules register their fields on the shared query/mutation types
import controllers.auth_controller  # noqa: F401
import controllers.employee_controller  # noqa: F401
from controllers.schema import employee_type, mutation, query, type_defs, user_type

schema = make_executable_schema(type_defs, query, mutation, user_type, employee_type)

explorer_html = ExplorerGraphiQL(title="Employee Management API").html(None)

graphql_bp = Blueprint("graphql", __name__)


@graphql_bp.route("/graphql", methods=["GET"])
def graphql_explorer():
    return explorer_html, 200


@graphql_bp.route("/graphql", methods=["POST"])
def graphql_server():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"errors": [{"message": "Request body must be a JSON object"}]}), 400

    success, result = graphql_sync(
        schema,
        data,
        context_value={
            "request": request,
            "store": current_app.extensions["store"],
            "uploader": current_app.extensions["uploader"],
        },
        debug=current_app.debug,
    )

    status_code = 200 if success else 400
    return jsonify(result), status_code
