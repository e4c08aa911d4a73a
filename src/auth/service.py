import logging
from enum import Enum
from typing import Any

from errors import InvalidCredentials, InvalidInput, NotFound

from .models import Account, Character
from .passwords import hash_password, verify_password
from .storage import AccountStore

logger = logging.getLogger(__name__)


class LoginResult(Enum):
    AUTHENTICATED = "authenticated"
    REGISTERED = "registered"


def _parse_level(level: Any) -> int:
    # HTML forms send the level as a string
    if isinstance(level, bool):
        raise InvalidInput("level must be an integer")
    try:
        value = int(level)
    except (TypeError, ValueError):
        raise InvalidInput("level must be an integer")
    if isinstance(level, float) and level != value:
        raise InvalidInput("level must be an integer")
    if value < 1:
        raise InvalidInput("level must be at least 1")
    return value


def _filled(*values: Any) -> bool:
    """True when every value is a non-empty string."""
    return all(isinstance(value, str) and value for value in values)


class AccountService:
    """
    Login/registration and character selection on top of an AccountStore.

    Holds no state between calls: every operation loads the store, and the
    mutating ones write the whole mapping back.
    """

    def __init__(self, store: AccountStore):
        self.store = store

    def identify(self, username: str | None, password: str | None) -> LoginResult:
        """
        Logs an existing user in, or registers the username on first sight.
        """
        if not _filled(username, password):
            raise InvalidInput("Missing password or username")

        accounts = self.store.load()
        account = accounts.get(username)

        if account is not None:
            if not verify_password(password, account.salt, account.hash):
                logger.warning("Failed login for %s", username)
                raise InvalidCredentials("incorrect password or username")
            logger.info("User %s logged in", username)
            return LoginResult.AUTHENTICATED

        salt, pw_hash = hash_password(password)
        accounts[username] = Account(username=username, salt=salt, hash=pw_hash)
        self.store.save(accounts)

        logger.info("Registered new account %s", username)
        return LoginResult.REGISTERED

    def set_character(
        self,
        username: str | None,
        character: str | None,
        level: Any,
        img: str | None,
    ) -> Character:
        if not _filled(username, character, img) or level in (None, ""):
            raise InvalidInput("Missing body params")

        selection = Character(name=character, level=_parse_level(level), img=img)

        accounts = self.store.load()
        account = accounts.get(username)
        if account is None:
            raise NotFound("User not found")

        account.character = selection
        self.store.save(accounts)

        logger.info("User %s selected %s (level %d)", username, selection.name, selection.level)
        return selection

    def get_character(self, username: str | None) -> Character | None:
        """Returns None when the account has not selected a character yet."""
        if not _filled(username):
            raise InvalidInput("Missing username")

        account = self.store.load().get(username)
        if account is None:
            raise NotFound("User not found")

        return account.character
