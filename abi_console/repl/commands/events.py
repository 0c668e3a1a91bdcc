"""
Event listing and watching commands.

Both modes collect the same filters and print entries the same way. Listing
drains what the node already has for a block range; watching prints new
entries until interrupted.
"""

from abi_console.abi import EventSpec, format_event
from abi_console.chain import LogEntry
from abi_console.common import Aborted, ConsoleError, InvalidArgument, detail, error, info
from abi_console.config import OPEN_END_BLOCK, POLL_INTERVAL


def _lookup_event(ctx, name: str) -> EventSpec:
    event = ctx.interface.event(name)
    if event is None:
        raise ConsoleError(f"unknown event: {name}")
    return event


def print_entry(event: EventSpec, entry: LogEntry) -> None:
    detail(format_event(event.inputs, entry.values, entry.block_number))


def list_events(ctx, name: str) -> int:
    """
    Print past events matching operator filters in a block range.

    Returns:
        Number of entries printed

    Raises:
        Aborted: the operator cancelled
        ExternalCallFailure: the query couldn't be opened
        DeliveryError: the node failed while returning entries
    """
    event = _lookup_event(ctx, name)
    filters = ctx.session.collect_filters(event.inputs)

    start, ok = ctx.session.int_with_default("start block ({}): ", 0)
    if not ok:
        raise Aborted()
    if start < 0:
        raise InvalidArgument(f"start block must not be negative: {start}")
    end, ok = ctx.session.int_with_default("end block (last, {}): ", OPEN_END_BLOCK)
    if not ok:
        raise Aborted()

    query = ctx.binding.filter_logs(event, filters, start, end if end >= 0 else None)
    count = 0
    try:
        for entry in query.entries():
            print_entry(event, entry)
            count += 1
    finally:
        query.release()
    return count


def watch_events(ctx, name: str) -> int:
    """
    Print new events matching operator filters until interrupted.

    The subscription is released on every exit path. An interrupt is a
    normal end of the watch.

    Returns:
        Number of entries printed

    Raises:
        Aborted: the operator cancelled filter collection
        ExternalCallFailure: the subscription couldn't be opened
        DeliveryError: the node failed while delivering entries
    """
    event = _lookup_event(ctx, name)
    filters = ctx.session.collect_filters(event.inputs)

    subscription = ctx.binding.watch_logs(event, filters)
    count = 0
    try:
        info("watching events, press Ctrl+C to stop")
        with ctx.interrupts() as notice:
            while not notice.is_set():
                for entry in subscription.poll():
                    print_entry(event, entry)
                    count += 1
                notice.wait(POLL_INTERVAL)
    finally:
        subscription.unsubscribe()
    return count


def cmd_list_events(ctx, name: str) -> None:
    try:
        list_events(ctx, name)
    except Aborted:
        return
    except ConsoleError as e:
        error(f"error listing logs: {e}")


def cmd_watch_events(ctx, name: str) -> None:
    try:
        watch_events(ctx, name)
    except Aborted:
        return
    except ConsoleError as e:
        error(f"error watching logs: {e}")
