"""Error taxonomy shared by the repository, service and CLI layers."""


class ProjectsError(Exception):
    """Base class for all errors raised by this package."""


class StoreFault(ProjectsError):
    """The relational store failed: connectivity, SQL execution or a constraint.

    Always wraps the underlying driver/SQLAlchemy exception as ``cause``.
    The enclosing transaction has been rolled back by the time this is raised.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        detail = f"{message}: {cause}" if cause is not None else message
        super().__init__(detail)


class GeneratedKeyMissing(StoreFault):
    """An insert succeeded but the store did not hand back a generated key."""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Failed to retrieve generated key for table '{table}'")


class ProjectNotFound(ProjectsError):
    """No project row matches the requested id."""

    def __init__(self, project_id: int | None, message: str | None = None):
        self.project_id = project_id
        self.message = message or f"Project with ID={project_id} does not exist."
        super().__init__(self.message)


class InvalidInput(ProjectsError):
    """Operator input could not be parsed into the expected type."""

    def __init__(self, value: str, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"{value} is not a valid {expected}.")
