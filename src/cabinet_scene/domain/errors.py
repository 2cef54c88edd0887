"""Domain exceptions."""

from __future__ import annotations


class ValidationError(Exception):
    """Raised when a cabinet spec cannot produce consistent geometry.

    Raised before any scene node is created, so a build either returns a
    complete tree or raises this error.

    Attributes:
        errors: Individual validation failures, in the order they were found.
    """

    def __init__(self, errors: list[str] | str) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class SceneGraphError(Exception):
    """Raised when a scene graph operation would corrupt the tree."""
