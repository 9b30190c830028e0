import logging

import pytest

from foodie.patterns.behavioral import (
    AddItemCommand,
    CookingOrder,
    Delivery,
    DeliveredOrder,
    DistanceShipping,
    FreeShipping,
    Kitchen,
    Observer,
    OrderContext,
    OrderSubject,
    OrderValidation,
    PaymentValidator,
    ShippingContext,
    StockValidator,
    ValidationHandler,
    build_chain,
)


class RecordingObserver(Observer):
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def update(self, order_id):
        self.calls.append((self.name, order_id))
        return f"{self.name}: {order_id}"


class BrokenObserver(Observer):
    def update(self, order_id):
        raise RuntimeError("kitchen on fire")


# --- Observer ---

def test_notify_reaches_every_observer_in_insertion_order():
    calls = []
    subject = OrderSubject()
    for name in ("first", "second", "third"):
        subject.add_observer(RecordingObserver(name, calls))

    subject.notify("42")

    assert calls == [("first", "42"), ("second", "42"), ("third", "42")]


def test_duplicate_observer_is_notified_once_per_registration():
    calls = []
    observer = RecordingObserver("dup", calls)
    subject = OrderSubject()
    subject.add_observer(observer)
    subject.add_observer(observer)

    subject.notify("1")

    assert calls == [("dup", "1"), ("dup", "1")]


def test_failing_observer_does_not_stop_fan_out(caplog):
    calls = []
    broken = BrokenObserver()
    subject = OrderSubject()
    subject.add_observer(broken)
    subject.add_observer(RecordingObserver("after", calls))

    with caplog.at_level(logging.ERROR, logger="foodie"):
        report = subject.notify("9")

    assert calls == [("after", "9")]
    assert len(report["notified"]) == 1
    assert report["failed"][0][0] is broken
    assert isinstance(report["failed"][0][1], RuntimeError)
    assert "BrokenObserver failed" in caplog.text


def test_remove_observer_and_unknown_removal_is_noop():
    calls = []
    observer = RecordingObserver("gone", calls)
    subject = OrderSubject()
    subject.add_observer(observer)

    subject.remove_observer(observer)
    subject.remove_observer(observer)
    subject.notify("1")

    assert calls == []
    assert subject.observers == []


def test_kitchen_and_delivery_messages():
    subject = OrderSubject()
    subject.add_observer(Kitchen())
    subject.add_observer(Delivery())

    report = subject.notify("7264526")

    assert report["messages"] == [
        "Cocina: preparando pedido 7264526",
        "Delivery: esperando pedido 7264526",
    ]


# --- Strategy ---

@pytest.mark.parametrize("amount", [0, 1, 99.5, 100, 12345])
def test_free_shipping_is_always_zero(amount):
    assert ShippingContext(FreeShipping()).get_shipping_cost(amount) == 0


@pytest.mark.parametrize("amount", [0, 10, 100, 250.75])
def test_distance_shipping_charges_twenty_percent(amount):
    assert ShippingContext(DistanceShipping()).get_shipping_cost(amount) == amount * 1.2


def test_negative_amount_is_rejected():
    with pytest.raises(ValueError):
        ShippingContext(FreeShipping()).get_shipping_cost(-1)


# --- Command ---

def test_execute_then_undo_restores_order():
    order = ["Empanada"]
    command = AddItemCommand(order, "Pizza")

    command.execute()
    assert order == ["Empanada", "Pizza"]

    command.undo()
    assert order == ["Empanada"]
    assert command.logs == ["Agregado Pizza", "Eliminado Pizza"]


def test_command_writes_to_shared_log():
    logs = []
    order = []
    AddItemCommand(order, "Pizza", logs).execute()
    AddItemCommand(order, "Flan", logs).execute()

    assert logs == ["Agregado Pizza", "Agregado Flan"]


def test_undo_without_execute_is_noop():
    order = ["Empanada"]
    command = AddItemCommand(order, "Pizza")

    command.undo()

    assert order == ["Empanada"]
    assert command.logs == []


# --- State ---

def test_order_lifecycle_statuses():
    order = OrderContext()
    statuses = [order.get_status()]
    for _ in range(4):
        order.next()
        statuses.append(order.get_status())

    assert statuses == ["nuevo", "En cocina", "En entrega", "Entregado", "Entregado"]


def test_delivered_state_is_absorbing(caplog):
    order = OrderContext()
    order.set_state(DeliveredOrder())
    state = order.state

    with caplog.at_level(logging.INFO, logger="foodie"):
        order.next()

    assert order.state is state
    assert order.is_delivered
    assert "El pedido ya fue entregado" in caplog.text


def test_set_state_replaces_current_state():
    order = OrderContext()
    order.set_state(CookingOrder())
    assert order.get_status() == "En cocina"
    assert not order.is_delivered


# --- Chain of Responsibility ---

@pytest.fixture
def chain():
    stock = StockValidator()
    stock.set_next(PaymentValidator())
    return stock


def test_out_of_stock_short_circuits(chain, caplog):
    with caplog.at_level(logging.WARNING, logger="foodie"):
        assert chain.handle(OrderValidation(in_stock=False, paid=True)) is False

    assert "Sin stock" in caplog.text
    assert "No pagado" not in caplog.text


def test_unpaid_order_fails_at_payment(chain, caplog):
    with caplog.at_level(logging.WARNING, logger="foodie"):
        assert chain.handle(OrderValidation(in_stock=True, paid=False)) is False

    assert "No pagado" in caplog.text


def test_valid_order_passes(chain):
    assert chain.handle(OrderValidation(in_stock=True, paid=True)) is True


def test_set_next_returns_added_link():
    stock = StockValidator()
    payment = PaymentValidator()
    assert stock.set_next(payment) is payment
    assert stock.next_handler is payment


def test_open_chain_end_passes():
    assert ValidationHandler().handle(OrderValidation(in_stock=False, paid=False))


def test_build_chain_links_in_given_order():
    payment = PaymentValidator()
    stock = StockValidator()

    head = build_chain(payment, stock)

    assert head is payment
    assert payment.next_handler is stock
    assert stock.next_handler is None


def test_build_chain_requires_handlers():
    with pytest.raises(ValueError):
        build_chain()


def test_validation_record_is_immutable():
    record = OrderValidation(in_stock=True, paid=True)
    with pytest.raises(AttributeError):
        record.paid = False
