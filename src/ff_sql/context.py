"""
Resolution context for a single build.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from .personality import Personality


@dataclass
class Context:
    """
    Mutable state for one call to build().

    Holds the active personality and the parameters accumulated while the
    fragment tree is resolved. A new Context is created for every build and is
    never shared between builds.

    Attributes:
        personality: Formatting pair used for identifiers and values
        params: Bound parameters, in the order they were appended
    """

    personality: "Personality"
    params: List[Any] = field(default_factory=list)

    def bind_param(self, raw: Any) -> int:
        """
        Append a parameter.

        Args:
            raw: Value to append

        Returns:
            Number of parameters after the append (1-based position of raw)
        """
        self.params.append(raw)
        return len(self.params)
