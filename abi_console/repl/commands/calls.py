"""
Constant call and transaction commands.

execute_constant_method() and execute_transact_method() do the work and
raise ConsoleError subclasses; the cmd_* wrappers print the outcome.
"""

from typing import Optional

from abi_console.abi import CallResult, MethodSpec, format_values, new_call_result
from abi_console.chain import SignerKind, TransactionOptions
from abi_console.common import (
    Aborted,
    ConsoleError,
    InputSession,
    SignerNotConfigured,
    WrongMutability,
    detail,
    error,
    info,
    log,
)


def _lookup_method(ctx, name: str) -> MethodSpec:
    method = ctx.interface.method(name)
    if method is None:
        raise ConsoleError(f"unknown method: {name}")
    return method


def execute_constant_method(ctx, name: str) -> Optional[CallResult]:
    """
    Call a constant method.

    Returns:
        The bound call result, or None if the method has no outputs

    Raises:
        WrongMutability: the method needs a transaction
        InvalidArgument: an argument didn't parse
        ExternalCallFailure: the call failed on the node
    """
    method = _lookup_method(ctx, name)
    if not method.constant:
        raise WrongMutability(f"method {name} is not constant")

    print("constant call arguments:")
    args = ctx.session.collect_arguments(method.inputs)
    result = new_call_result(method.outputs)
    raw = ctx.binding.call(method, args)
    if result is None:
        return None
    result.bind(raw)
    return result


def negotiate_transaction_options(session: InputSession, binding, method: MethodSpec) -> TransactionOptions:
    """
    Ask for value, gas price and gas limit, in that order.

    Raises:
        Aborted: the operator cancelled any of the questions
    """
    options = TransactionOptions()

    if method.payable:
        send, ok = session.yes_no("method is payable. send amount with transaction? ({}): ", False)
        if not ok:
            raise Aborted()
        if send:
            options.value = session.big_int("amount (wei): ")

    estimate_price, ok = session.yes_no("estimate gas price? ({}): ", True)
    if not ok:
        raise Aborted()
    if not estimate_price:
        suggested = binding.suggest_gas_price()
        options.gas_price = session.big_int_with_default("gas price ({}): ", suggested)

    estimate_limit, ok = session.yes_no("estimate gas limit? ({}): ", True)
    if not ok:
        raise Aborted()
    if not estimate_limit:
        limit, ok = session.int_with_default("gas limit ({}): ", 0)
        if not ok:
            raise Aborted()
        # 0 leaves the limit to the node
        options.gas_limit = limit or None

    return options


def execute_transact_method(ctx, name: str) -> str:
    """
    Submit a transaction to a non-constant method.

    Returns:
        The transaction hash

    Raises:
        WrongMutability: the method is constant
        SignerNotConfigured: no signer has been set
        InvalidArgument: an argument didn't parse
        Aborted: the operator cancelled
        ExternalCallFailure: estimation or submission failed
    """
    method = _lookup_method(ctx, name)
    if method.constant:
        raise WrongMutability(f"method {name} is constant")
    signer = ctx.signer
    if signer.kind is SignerKind.UNSET:
        raise SignerNotConfigured()

    print("transaction arguments:")
    args = ctx.session.collect_arguments(method.inputs)
    options = negotiate_transaction_options(ctx.session, ctx.binding, method)
    return ctx.binding.transact(method, args, options, signer)


def cmd_constant(ctx, name: str) -> None:
    """Run a constant call and print its results."""
    try:
        result = execute_constant_method(ctx, name)
    except Aborted:
        return
    except ConsoleError as e:
        error(f"call failed: {e}")
        return

    if result is None:
        info("no return values")
        return
    detail(format_values(result.outputs, result.results()))


def cmd_transact(ctx, name: str) -> None:
    """Submit a transaction and print its hash."""
    try:
        tx_hash = execute_transact_method(ctx, name)
    except Aborted:
        return
    except ConsoleError as e:
        error(f"transaction failed: {e}")
        return
    log(f"transaction sent: {tx_hash}")
