from __future__ import annotations


# Store failures are explicit and separable from other runtime errors.
class RepositoryError(RuntimeError):
    def __init__(self, operation: str, cause: BaseException | str) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")
