from werkzeug.security import generate_password_hash, check_password_hash

# SHA-256 based, salted by werkzeug
HASH_METHOD = "pbkdf2:sha256"


def generate_hash(password: str) -> str:
    return generate_password_hash(password, method=HASH_METHOD)


def check_hash(password: str, hashed: str) -> bool:
    try:
        return check_password_hash(hashed, password)
    except (TypeError, ValueError):
        return False
