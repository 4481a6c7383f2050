from fastapi import HTTPException, status


class ServiceError(Exception):
    """Base exception for service errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error_type: str = 'service_error'):
        self.message = message
        self.error_type = error_type
        super().__init__(message)


class NotFoundError(ServiceError):
    """A referenced skill, user or swap request id does not resolve."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, identifier: str):
        super().__init__(f"{entity} '{identifier}' not found", 'not_found')
        self.entity = entity
        self.identifier = identifier


class ForbiddenError(ServiceError):
    """The caller lacks the relationship the action requires."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str):
        super().__init__(message, 'forbidden')


class InvalidOperationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message, 'invalid_operation')


class InvalidArgumentError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message, 'invalid_argument')


class ConflictError(ServiceError):
    """The entity is not in the state the action requires."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str, error_type: str = 'conflict'):
        super().__init__(message, error_type)


class StatusTransitionError(ServiceError):
    """Progress update attempted from a state that does not allow it."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, current_status: str, target_status: str):
        super().__init__(
            f"Cannot move swap request from '{current_status}' to '{target_status}'",
            'invalid_transition',
        )
        self.current_status = current_status
        self.target_status = target_status


def to_http_exception(error: ServiceError) -> HTTPException:
    return HTTPException(
        status_code=error.status_code,
        detail={'code': error.error_type, 'message': error.message},
    )
