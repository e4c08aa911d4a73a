"""
Account records as they live in the account document.

The document is a single JSON object keyed by username:
    { "alice": { "username": "alice", "salt": ..., "hash": ..., "character": {...} | null } }
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Character:
    """The character an account has selected. Replaced wholesale, never merged."""

    name: str
    level: int
    img: str

    def to_dict(self) -> dict:
        return {"name": self.name, "level": self.level, "img": self.img}

    @classmethod
    def from_dict(cls, data: dict) -> "Character":
        return cls(name=data["name"], level=data["level"], img=data["img"])


@dataclass
class Account:
    username: str
    salt: str
    hash: str
    character: Optional[Character] = None

    def to_dict(self) -> dict:
        """Serialize account to dictionary."""
        return {
            "username": self.username,
            "salt": self.salt,
            "hash": self.hash,
            "character": self.character.to_dict() if self.character else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Account":
        """Deserialize account from dictionary."""
        character = data.get("character")
        return cls(
            username=data["username"],
            salt=data["salt"],
            hash=data["hash"],
            character=Character.from_dict(character) if character else None,
        )
