"""Domain service: order status transition policies.

Two policies exist. The strict one allows only forward moves along
pending -> paid -> in_delivery -> completed (skipping ahead is fine),
cancellation from pending or paid, and nothing out of a terminal state.
The permissive one mirrors an admin selector that can set any status.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.exceptions import IllegalTransitionError, ValidationError
from storefront.domain.model.order import OrderStatus

_FORWARD = (
    OrderStatus.PENDING,
    OrderStatus.PAID,
    OrderStatus.IN_DELIVERY,
    OrderStatus.COMPLETED,
)
_CANCELLABLE = (OrderStatus.PENDING, OrderStatus.PAID)


class TransitionPolicy(ABC):

    name: str

    @abstractmethod
    def allowed_targets(self, current: OrderStatus) -> list[OrderStatus]:
        """Return every status reachable from *current*."""

    def check(self, current: OrderStatus, target: OrderStatus) -> None:
        if target not in self.allowed_targets(current):
            raise IllegalTransitionError(
                f"Cannot move order from {current.value} to {target.value}"
            )


class StrictTransitionPolicy(TransitionPolicy):

    name = "strict"

    def allowed_targets(self, current: OrderStatus) -> list[OrderStatus]:
        if current.is_terminal:
            return []
        position = _FORWARD.index(current)
        targets = list(_FORWARD[position + 1:])
        if current in _CANCELLABLE:
            targets.append(OrderStatus.CANCELLED)
        return targets


class PermissiveTransitionPolicy(TransitionPolicy):

    name = "permissive"

    def allowed_targets(self, current: OrderStatus) -> list[OrderStatus]:
        return [status for status in OrderStatus if status != current]


_POLICIES: dict[str, type[TransitionPolicy]] = {
    StrictTransitionPolicy.name: StrictTransitionPolicy,
    PermissiveTransitionPolicy.name: PermissiveTransitionPolicy,
}


def policy_for(name: str) -> TransitionPolicy:
    """Look up a policy by its configured name."""
    try:
        return _POLICIES[name.lower()]()
    except KeyError as exc:
        raise ValidationError(
            f"Unknown status policy '{name}' (expected one of {sorted(_POLICIES)})"
        ) from exc


def parse_status(raw: str) -> OrderStatus:
    try:
        return OrderStatus(raw.strip().lower())
    except ValueError as exc:
        valid = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Unknown order status '{raw}' (expected one of {valid})") from exc
