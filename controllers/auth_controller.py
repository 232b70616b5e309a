import logging

from controllers.schema import mutation, query
from models.users import User
from utils.errors import AuthenticationError, FieldError, NotFoundError
from utils.responses import shape_response
from utils.validation import LOGIN_RULES, SIGNUP_RULES, validate

logger = logging.getLogger(__name__)


# -------------------------------------------------------------
# LOGIN
# -------------------------------------------------------------
@shape_response("user", "Login failed")
def login_user(store, username_or_email, password):
    validate({"usernameOrEmail": username_or_email, "password": password}, LOGIN_RULES)

    user = User.find_by_identifier(store, username_or_email)
    if not user:
        raise NotFoundError(
            [FieldError("usernameOrEmail", "Invalid username/email")],
            message="User not found",
        )

    if not User.check_password(user, password):
        raise AuthenticationError([FieldError("password", "Invalid password")])

    logger.info("User %s logged in", user["username"])
    return "Login successful", User.public(user)


# -------------------------------------------------------------
# SIGNUP
# -------------------------------------------------------------
@shape_response("user", "Signup failed")
def signup_user(store, data):
    validate(data, SIGNUP_RULES)

    user = User(data["username"], data["email"], data["password"]).save(store)

    logger.info("User %s signed up", user["username"])
    return "Signup successful", user


@query.field("login")
def resolve_login(_, info, usernameOrEmail, password):
    return login_user(info.context["store"], usernameOrEmail, password)


@mutation.field("signup")
def resolve_signup(_, info, input):
    return signup_user(info.context["store"], input)
