import pytest
from buildmart.database.orders import OrderStore
from buildmart.models.order import Order, OrderPatch, OrderStatus
from buildmart.services.tracking import (
    build_tracking,
    current_step_index,
    has_outstanding_balance,
    progress_percent,
    status_label,
    tracking_steps,
    verification_steps,
)


def _order(**fields: object) -> Order:
    return OrderStore().add_order(OrderPatch(**fields))


@pytest.mark.parametrize(
    ("status", "index", "percent"),
    [
        (OrderStatus.PENDING, 0, 0),
        (OrderStatus.PROCESSING, 1, 25),
        (OrderStatus.SHIPPED, 2, 50),
        (OrderStatus.OUT_FOR_DELIVERY, 3, 75),
        (OrderStatus.DELIVERED, 4, 100),
    ],
)
def test_progress_follows_delivery_stages(status: OrderStatus, index: int, percent: float) -> None:
    assert current_step_index(status) == index
    assert progress_percent(status) == percent


@pytest.mark.parametrize("status", [OrderStatus.VERIFIED, OrderStatus.PAID, OrderStatus.CANCELLED])
def test_statuses_outside_the_tracker_render_as_just_placed(status: OrderStatus) -> None:
    assert current_step_index(status) == 0
    assert progress_percent(status) == 0

    steps = tracking_steps(status)
    assert [s.completed for s in steps] == [True, False, False, False, False]
    assert steps[0].current


def test_tracking_steps_mark_completed_and_current() -> None:
    steps = tracking_steps(OrderStatus.SHIPPED)

    assert [s.id for s in steps] == [
        OrderStatus.PENDING,
        OrderStatus.PROCESSING,
        OrderStatus.SHIPPED,
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELIVERED,
    ]
    assert [s.completed for s in steps] == [True, True, True, False, False]
    assert [s.current for s in steps] == [False, False, True, False, False]


def test_verification_steps_cover_early_stages() -> None:
    steps = verification_steps(OrderStatus.PAID)

    assert [s.label for s in steps] == [
        "Order Received",
        "Order Verified",
        "Payment Received",
        "Processing",
        "Shipped",
        "Delivered",
    ]
    assert [s.completed for s in steps] == [True, True, True, False, False, False]


def test_verification_steps_mark_nothing_for_unlisted_status() -> None:
    steps = verification_steps(OrderStatus.OUT_FOR_DELIVERY)

    assert not any(s.completed or s.current for s in steps)


def test_status_label() -> None:
    assert status_label(OrderStatus.SHIPPED) == "Shipped"
    assert status_label(OrderStatus.VERIFIED) == "Unknown"


def test_outstanding_balance_after_advance_only() -> None:
    assert not has_outstanding_balance(_order(total=1000))
    assert has_outstanding_balance(_order(total=1000, advance_paid=300, due_amount=700, is_advance_paid=True))
    assert not has_outstanding_balance(
        _order(total=1000, advance_paid=300, due_amount=0, is_advance_paid=True, is_due_paid=True)
    )


def test_build_tracking() -> None:
    tracking = build_tracking(_order(status=OrderStatus.OUT_FOR_DELIVERY))

    assert tracking.status_label == "Unknown"
    assert tracking.current_step_index == 3
    assert tracking.progress_percent == 75
    assert len(tracking.steps) == 5
    assert len(tracking.verification_steps) == 6
    assert tracking.has_outstanding_balance is False
