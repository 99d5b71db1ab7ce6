"""Application-specific exceptions.

Repositories and services raise these; the routers translate them into
HTTP responses.
"""


class ClassroomError(Exception):
    """Base exception for all classroom tracker errors."""

    pass


class NotFoundError(ClassroomError):
    """Raised when a referenced entity does not exist."""

    entity = "Entity"

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"{self.entity} '{identifier}' not found")


class UserNotFoundError(NotFoundError):
    entity = "User"


class ClassNotFoundError(NotFoundError):
    entity = "Class"


class AssessmentNotFoundError(NotFoundError):
    entity = "Assessment"


class DuplicateUsernameError(ClassroomError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username already exists")


class ClassCodeCollisionError(ClassroomError):
    """Raised when no unused class code could be generated."""

    pass


class InvalidReferenceError(ClassroomError):
    """Raised when a write points at a user, class or assessment that does not exist."""

    pass
