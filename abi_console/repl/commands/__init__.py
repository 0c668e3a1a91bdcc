"""
abi_console.repl.commands - Command handlers for the console

This package contains command handler functions organized by feature area:
- calls: Constant calls and transactions
- events: Event listing and watching
- signer: Signer configuration
"""

# Calls and transactions
from .calls import (
    execute_constant_method,
    execute_transact_method,
    negotiate_transaction_options,
    cmd_constant,
    cmd_transact,
)

# Events
from .events import (
    list_events,
    watch_events,
    cmd_list_events,
    cmd_watch_events,
)

# Signer
from .signer import (
    load_key_signer,
    cmd_signer_key,
    cmd_signer_show,
)

__all__ = [
    # Calls
    'execute_constant_method', 'execute_transact_method',
    'negotiate_transaction_options', 'cmd_constant', 'cmd_transact',
    # Events
    'list_events', 'watch_events', 'cmd_list_events', 'cmd_watch_events',
    # Signer
    'load_key_signer', 'cmd_signer_key', 'cmd_signer_show',
]
