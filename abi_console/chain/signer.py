"""
Transaction signer.

A Signer is either unset or backed by a private key. The session keeps the
current signer and reads it right before each transaction.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount


class SignerKind(Enum):
    UNSET = "unset"
    KEY = "key"


@dataclass(frozen=True)
class Signer:
    """The account used to sign transactions, if any."""
    account: Optional[LocalAccount] = None

    @property
    def kind(self) -> SignerKind:
        return SignerKind.KEY if self.account is not None else SignerKind.UNSET

    @property
    def address(self) -> Optional[str]:
        return self.account.address if self.account is not None else None

    @classmethod
    def from_key(cls, key) -> "Signer":
        return cls(Account.from_key(key))


def signer_from_key_file(data: str, password: Optional[str] = None) -> Signer:
    """
    Build a signer from key file contents.

    Args:
        data: Either a hex private key or an encrypted JSON keystore
        password: Keystore password; None for a plain hex key

    Raises:
        ValueError: the key is malformed or the password is wrong
    """
    if password is None:
        return Signer.from_key(data.strip())
    try:
        keystore = json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"not a JSON keystore: {e.msg}")
    return Signer.from_key(Account.decrypt(keystore, password))
