# errors.py
# Typed failures of the judging core. Each maps to one HTTP status.


class JudgingError(Exception):
    status_code = 400
    kind = 'error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.kind, 'message': self.message}


class NotFound(JudgingError):
    """A referenced hackathon, criterion, assignment, project or user does not exist."""
    status_code = 404
    kind = 'not_found'


class Forbidden(JudgingError):
    """The acting user lacks the role the operation requires."""
    status_code = 403
    kind = 'forbidden'


class Conflict(JudgingError):
    status_code = 409
    kind = 'conflict'


class ValidationFailed(JudgingError):
    """Bad input: score out of range, unknown criterion, wrong demotion target."""
    status_code = 400
    kind = 'validation'
