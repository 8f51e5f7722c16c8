from dataclasses import replace

import pytest

from drillbook.lessons.structs import (
    ChangeColor,
    Echo,
    Move,
    Order,
    Package,
    Point,
    ProcessState,
    Quit,
    create_order_template,
)


def test_your_order():
    order_template = create_order_template()
    your_order = replace(order_template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == order_template.year
    assert your_order.made_by_phone == order_template.made_by_phone
    assert your_order.made_by_mobile == order_template.made_by_mobile
    assert your_order.made_by_email == order_template.made_by_email
    assert your_order.item_number == order_template.item_number
    assert your_order.count == 1


def test_order_template_values():
    assert create_order_template() == Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", -2210)


def test_zero_weight_is_rejected():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 0)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    cents_per_gram = 3
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_fees_overflow():
    with pytest.raises(OverflowError):
        Package("Spain", "Spain", 2**30).get_fees(4)


def test_match_message_call():
    state = ProcessState(
        color=(0, 0, 0),
        position=Point(0, 0),
        quit_requested=False,
        message="hello world",
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit_requested is True
    assert state.message == "hello world"


def test_echo_replaces_message():
    state = ProcessState(message="old")
    state.process(Echo("new"))
    assert state.message == "new"


def test_unknown_message_raises():
    with pytest.raises(TypeError):
        ProcessState().process("jump")