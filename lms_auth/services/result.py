"""Tagged success/failure values returned by the auth service."""


class Result:
    """Either a JSON-ready payload or an AppError, never both."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error

    @property
    def success(self):
        return self.error is None

    @classmethod
    def ok(cls, **payload):
        return cls(payload={'success': True, **payload})

    @classmethod
    def fail(cls, error):
        return cls(error=error)

    def __repr__(self):
        if self.success:
            return f'<Result ok {self.payload}>'
        return f'<Result error {self.error.error_code}: {self.error.message}>'
