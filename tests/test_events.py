import pytest

from abi_console.chain import argument_filters
from abi_console.common import Aborted, DeliveryError, InvalidArgument
from abi_console.repl.commands import cmd_list_events, cmd_watch_events, list_events, watch_events

from conftest import ALICE, BOB, FakeBinding, FakeNotice, FakeQuery, FakeSubscription, entry


def test_list_with_from_filter(make_ctx, interface, capsys):
    query = FakeQuery([
        entry(100, **{"from": ALICE, "to": BOB, "value": 7}),
        entry(105, **{"from": ALICE, "to": ALICE, "value": 1}),
    ])
    binding = FakeBinding(query=query)
    ctx = make_ctx(["yes", ALICE.lower(), "no", "", ""], binding=binding)

    assert list_events(ctx, "Transfer") == 2
    assert binding.calls == [("filter_logs", "Transfer", [ALICE, None], 0, None)]
    assert query.released

    out = capsys.readouterr().out
    assert f"block 100: from={ALICE} to={BOB} value=7" in out
    assert "block 105:" in out

    transfer = interface.event("Transfer")
    assert argument_filters(transfer, [ALICE, None]) == {"from": ALICE}


def test_list_block_range(make_ctx):
    ctx = make_ctx(["", "", "100", "200"])
    list_events(ctx, "Approval")
    assert ctx.binding.calls == [("filter_logs", "Approval", [None, None], 100, 200)]
    assert ctx.session.reader.prompts[-1] == "end block (last, -1): "


def test_list_rejects_negative_start(make_ctx):
    ctx = make_ctx(["", "", "-5"])
    with pytest.raises(InvalidArgument):
        list_events(ctx, "Transfer")
    assert ctx.binding.calls == []


def test_list_cancel_at_block_range(make_ctx):
    ctx = make_ctx(["", "", "", ".."])
    with pytest.raises(Aborted):
        list_events(ctx, "Transfer")
    assert ctx.binding.calls == []


def test_list_releases_query_on_delivery_error(make_ctx, capsys):
    query = FakeQuery([entry(1, value=1), entry(2, value=2)], fail_after=1)
    ctx = make_ctx(["", "", "", ""], binding=FakeBinding(query=query))

    with pytest.raises(DeliveryError):
        list_events(ctx, "Transfer")
    assert query.released

    query.released = False
    ctx.session.reader.answers = ["", "", "", ""]
    cmd_list_events(ctx, "Transfer")
    assert query.released
    assert "error listing logs: connection lost" in capsys.readouterr().out


def test_watch_until_interrupted(make_ctx, capsys):
    subscription = FakeSubscription([[entry(10, **{"from": ALICE, "to": BOB, "value": 3})], []])
    notice = FakeNotice(fire_after=2)
    ctx = make_ctx(["", ""], binding=FakeBinding(subscription=subscription), notice=notice)

    cmd_watch_events(ctx, "Transfer")

    out = capsys.readouterr().out
    assert f"block 10: from={ALICE} to={BOB} value=3" in out
    assert "[ERROR]" not in out
    assert subscription.unsubscribed
    assert notice.entered and notice.exited
    assert ctx.binding.calls == [("watch_logs", "Transfer", [None, None])]


def test_watch_delivery_error_unsubscribes(make_ctx, capsys):
    subscription = FakeSubscription([], fail=True)
    ctx = make_ctx(["", ""], binding=FakeBinding(subscription=subscription), notice=FakeNotice(5))

    cmd_watch_events(ctx, "Approval")

    assert subscription.unsubscribed
    assert "error watching logs: subscription dropped" in capsys.readouterr().out


def test_watch_cancel_opens_nothing(make_ctx):
    ctx = make_ctx([".."], notice=FakeNotice())
    with pytest.raises(Aborted):
        watch_events(ctx, "Transfer")
    assert ctx.binding.calls == []
