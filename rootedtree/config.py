"""Configuration system for RootedTree.

This module defines how users tune node identity assignment and how much
self-checking a Tree does while it is being mutated.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, List


def _fresh_token() -> str:
    """Generate a process-unique node id."""
    return uuid.uuid4().hex


@dataclass
class IdConfig:
    """How a Node picks its id when the caller does not supply one.

    Resolution order: explicit id, then the payload's hash method (if the
    payload has it), then a freshly generated token.
    """

    hash_method: str = "get_hash"                       # Payload method giving a stable id
    id_factory: Callable[[], Any] = _fresh_token        # Fallback token generator

    def payload_hash(self, value: Any) -> Any:
        """Return the payload's own identity, or None if it has none.

        Args:
            value: Node payload

        Returns:
            Result of the payload's hash method, None if the method is missing
        """
        if not self.hash_method:
            return None
        method = getattr(value, self.hash_method, None)
        if not callable(method):
            return None
        return method()

    def validate(self) -> List[str]:
        """Validate id configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not callable(self.id_factory):
            errors.append("id_factory must be callable")
        if self.hash_method is not None and not isinstance(self.hash_method, str):
            errors.append("hash_method must be a method name or None")
        return errors


@dataclass
class TreeConfig:
    """Complete configuration for a Tree.

    Attributes:
        ids: Id assignment settings used by Tree.create_node
        check_invariants: Re-validate the whole tree after every mutation
        log_mutations: Emit DEBUG records for add/remove operations
    """

    ids: IdConfig = field(default_factory=IdConfig)
    check_invariants: bool = False
    log_mutations: bool = True

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config that verifies every invariant after each mutation.

        Useful in tests and while debugging; validation walks the full tree,
        so every mutation becomes O(size).

        Returns:
            TreeConfig with invariant checking enabled
        """
        return cls(check_invariants=True)

    @classmethod
    def quiet(cls) -> 'TreeConfig':
        """Create config that does not log individual mutations.

        Returns:
            TreeConfig with mutation logging disabled
        """
        return cls(log_mutations=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.ids, IdConfig):
            errors.append("ids must be an IdConfig")
        else:
            errors.extend(self.ids.validate())
        return errors


__all__ = [
    'IdConfig',
    'TreeConfig',
]
