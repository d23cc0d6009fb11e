"""Domain exceptions."""


class DashPermError(Exception):
    """Base exception for dashperm."""

    pass


class ValidationError(DashPermError):
    """Validation failed for input data."""

    pass


class ConflictingSubjectError(ValidationError):
    """Permission entry targets both a user and a team."""

    def __init__(self, message: str = "Permission cannot have both a user and team") -> None:
        super().__init__(message)


class InvalidSubjectCombinationError(ValidationError):
    """Permission entry pairs a built-in role with a user or team."""

    def __init__(
        self, message: str = "Permission cannot have both a role and a user/team"
    ) -> None:
        super().__init__(message)


class AuthorizationDenied(DashPermError):
    """Caller may not administer the resource or would lose own admin rights."""

    pass


class NotFound(DashPermError):
    """Requested resource was not found."""

    def __init__(self, kind: str, ref: object | None = None) -> None:
        self.kind = kind
        self.ref = ref
        message = f"{kind} not found" if ref is None else f"{kind} not found: {ref}"
        super().__init__(message)


class ConflictError(DashPermError):
    """Submitted entries conflict with existing permissions."""

    pass


class AlreadyGranted(ConflictError):
    """An identical permission for the subject already exists."""

    def __init__(self, message: str = "Permission already exists") -> None:
        super().__init__(message)


class OverrideForbidden(ConflictError):
    """Entry would override an inherited permission with a lower or equal one."""

    def __init__(
        self, message: str = "You can only override a permission to be higher"
    ) -> None:
        super().__init__(message)


class AclInfoMissing(ConflictError):
    """Legacy store: entry has no user, team or role."""

    def __init__(self, message: str = "User, team or role is required") -> None:
        super().__init__(message)


class ResourceEmpty(ConflictError):
    """Legacy store: entries are not attached to any resource."""

    def __init__(self, message: str = "Dashboard id is required") -> None:
        super().__init__(message)


class DependencyError(DashPermError):
    """Oracle, sink or store failed for infrastructure reasons."""

    pass
