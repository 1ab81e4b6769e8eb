"""
Exception hierarchy for cycle cut computation.

Everything raised by the package inherits from CycleCutError so callers
can catch it uniformly. InvariantViolation subclasses signal defects in
the computation itself and are never worth retrying.
"""
from typing import Optional


class CycleCutError(Exception):
    """Base exception carrying the cycle start and horizon being computed."""

    def __init__(self, message: str, cycle_start: Optional[int] = None, horizon: Optional[int] = None):
        self.message = message
        self.cycle_start = cycle_start
        self.horizon = horizon
        super().__init__(self._render())

    def _render(self) -> str:
        context = []
        if self.cycle_start is not None:
            context.append(f"cycle_start={self.cycle_start}")
        if self.horizon is not None:
            context.append(f"horizon={self.horizon}")
        prefix = f"[{', '.join(context)}] " if context else ""
        return f"{prefix}{self.message}"

    def with_context(self, cycle_start: Optional[int] = None, horizon: Optional[int] = None) -> "CycleCutError":
        """Fill in context that was unknown where the error was raised."""
        if self.cycle_start is None:
            self.cycle_start = cycle_start
        if self.horizon is None:
            self.horizon = horizon
        self.args = (self._render(),)
        return self


class InvariantViolation(CycleCutError):
    """An internal invariant did not hold."""
    pass


class MalformedSkeletonError(InvariantViolation):
    """A skeleton edge points at a position that was never assigned an index."""
    pass


class InfeasibleFlowError(InvariantViolation):
    """An edge was left without flow, or flow was left over after decomposition."""
    pass


class BacktraceError(InvariantViolation):
    """The alignment backtrace reached a cell with no valid direction."""
    pass


class SubsequenceError(InvariantViolation):
    """A covering walk could not be embedded into the merged supersequence."""
    pass


class OrphanPositionError(InvariantViolation):
    """A position other than 0 has no incoming relation edge after compaction."""
    pass


class GraphAccessError(CycleCutError):
    """The topology accessor could not answer a query."""
    pass


class UnknownNodeError(GraphAccessError):
    """Queried node identifier is not part of the graph."""

    def __init__(self, node):
        self.node = node
        super().__init__(f"Unknown node identifier: {node!r}")


class InvalidGraphError(GraphAccessError):
    """A node carries data the accessor cannot turn into a span length."""
    pass
