"""
Signer configuration commands.
"""

from pathlib import Path
from typing import Optional

from abi_console.chain import Signer, SignerKind, signer_from_key_file
from abi_console.common import Aborted, ConsoleError, InputSession, error, info, log, warn


def load_key_signer(session: InputSession, root: Optional[Path] = None) -> Signer:
    """
    Ask for a key file and build a signer from it.

    The file holds either a hex private key or an encrypted JSON keystore.

    Raises:
        Aborted: the operator cancelled
        PathError: the file doesn't exist or isn't a regular file
        OSError: the file can't be read
        ValueError: the key or password is invalid
    """
    root = root or Path.cwd()
    key_file = session.path("key file: ", root, must_exist=True)
    if not key_file:
        print("aborted")
        raise Aborted()
    data = Path(key_file).read_text()

    encrypted, ok = session.yes_no("encrypted? ({}): ", False)
    if not ok:
        raise Aborted()
    password = session.password() if encrypted else None
    return signer_from_key_file(data, password)


def cmd_signer_key(ctx) -> None:
    """Replace the session signer with one loaded from a key file."""
    try:
        signer = load_key_signer(ctx.session)
    except Aborted:
        return
    except (ConsoleError, OSError, ValueError) as e:
        error(f"can't read key file: {e}")
        return
    ctx.signer = signer
    log(f"signer set to {signer.address}")


def cmd_signer_show(ctx) -> None:
    """Print the configured signer."""
    if ctx.signer.kind is SignerKind.UNSET:
        warn("no signer configured")
        return
    info(f"signer: {ctx.signer.address}")
