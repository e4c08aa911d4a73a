import copy
import json
import logging
from pathlib import Path
from typing import Dict, Protocol

from errors import StorageFailure

from .models import Account

logger = logging.getLogger(__name__)

PRETTY_PRINT = 4


class AccountStore(Protocol):
    """
    Whole-document repository for accounts.

    There are no partial updates: callers load the full mapping, change it
    and save it back. Requests are served from a threadpool, so two callers
    can do this at once; they race, and the last save wins.
    """

    def load(self) -> Dict[str, Account]:
        ...

    def save(self, accounts: Dict[str, Account]) -> None:
        ...


class JsonAccountStore:
    """Accounts persisted as one JSON document on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Dict[str, Account]:
        if not self.path.exists():
            return {}

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            raise StorageFailure(f"cannot read {self.path}") from err

        if not isinstance(raw, dict):
            raise StorageFailure(f"{self.path} is not a JSON object")

        accounts: Dict[str, Account] = {}
        for username, record in raw.items():
            try:
                account = Account.from_dict(record)
            except (KeyError, TypeError, AttributeError) as err:
                raise StorageFailure(f"malformed account record {username!r}") from err

            if account.username != username:
                raise StorageFailure(
                    f"account key {username!r} does not match username {account.username!r}"
                )
            accounts[username] = account

        return accounts

    def save(self, accounts: Dict[str, Account]) -> None:
        document = {name: account.to_dict() for name, account in accounts.items()}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(document, indent=PRETTY_PRINT), encoding="utf-8")
        except OSError as err:
            raise StorageFailure(f"cannot write {self.path}") from err

        logger.debug("Saved %d accounts to %s", len(accounts), self.path)


class InMemoryAccountStore:
    def __init__(self, accounts: Dict[str, Account] | None = None):
        self._accounts: Dict[str, Account] = copy.deepcopy(accounts or {})

    def load(self) -> Dict[str, Account]:
        return copy.deepcopy(self._accounts)

    def save(self, accounts: Dict[str, Account]) -> None:
        self._accounts = copy.deepcopy(accounts)
