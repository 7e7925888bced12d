class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a member lacks permission for an action."""


class AssignmentError(DomainError):
    """Raised when weekly assignments cannot be generated."""


class NoPeopleError(AssignmentError):
    def __init__(self, message: str = "No people found to assign."):
        super().__init__(message)


class NoMembersError(AssignmentError):
    def __init__(self, message: str = "No members found to receive assignments."):
        super().__init__(message)


class NoMemberProfilesError(AssignmentError):
    def __init__(self, message: str = "No approved member profiles found."):
        super().__init__(message)


class AssignmentsAlreadyExistError(AssignmentError):
    def __init__(self, message: str = "Assignments for this week already exist."):
        super().__init__(message)


class UndoWindowExpiredError(ValidationError):
    def __init__(self, message: str = "The undo window for this assignment has passed."):
        super().__init__(message)
