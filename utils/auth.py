from werkzeug.security import check_password_hash, generate_password_hash


# One-way hash for a plaintext password before it is stored
def hash_password(password):
    return generate_password_hash(password)


# Compare a plaintext password with a stored hash
def verify_password(password_hash, password):
    if not password_hash or password is None:
        return False
    return check_password_hash(password_hash, password)
