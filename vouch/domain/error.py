"""Domain layer errors.

Messages are user-visible and stable; the frontend matches on some of them.
"""


class DomainError(Exception):
    """Base domain error."""

    message = "Request could not be processed."

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they do not own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to access {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class SelfInviteError(ValidationError):
    message = "User can not send invite to self."


class DuplicateInviteeError(BusinessRuleViolationError):
    message = "Invitation already sent."

    def __init__(self, emails: list[str] | None = None, message: str | None = None):
        self.emails = emails or []
        if message is None and self.emails:
            message = f"Already sent invitation to {', '.join(self.emails)}."
        super().__init__(message)


class InvitationLimitError(BusinessRuleViolationError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"You can not send more than {limit} invitations.")


class OneVerifierOnlyError(BusinessRuleViolationError):
    message = "Invite can not be sent to more than one verifier."


class AlreadyMemberError(BusinessRuleViolationError):
    message = "Invite already accepted."


class AlreadyVerifiedError(BusinessRuleViolationError):
    message = "Already verified."


class RevokeNotAllowedError(BusinessRuleViolationError):
    message = "Sorry, you can not revoke this connection."


class InvalidVerificationIdError(ValidationError):
    message = "Verification id is invalid."


class InvalidAnswerError(ValidationError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Invalid answer for {field_name}.")


class InvitationNotFoundError(NotFoundError):
    def __init__(self, identifier: str):
        super().__init__("Invitation", identifier, message="Invalid id.")


class SubjectNotFoundError(NotFoundError):
    def __init__(self, resource: str, identifier: str, message: str | None = None):
        super().__init__(
            resource,
            identifier,
            message=message or f"{resource} information not found.",
        )


class UserNotFoundError(NotFoundError):
    def __init__(self, identifier: str):
        super().__init__("User", identifier, message="User not found.")


class NotificationNotFoundError(NotFoundError):
    def __init__(self, identifier: str):
        super().__init__("Notification", identifier, message="Notification not found.")


class PlatformSettingsNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__(
            "PlatformSettings", "active", message="Settings record not found."
        )
