from functools import wraps


def login_required(fn):
    """Session action guard: only runs when a customer is logged in."""

    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        if self.customer is None:
            self.echo("Please login first")
            return None
        return fn(self, *args, **kwargs)

    return wrapper
