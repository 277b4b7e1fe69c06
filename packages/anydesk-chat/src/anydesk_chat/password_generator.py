"""Session password generator."""

from __future__ import annotations

import secrets
import string

from anydesk_cli.domain.exceptions import AnyDeskConfigError

DEFAULT_PASSWORD_LENGTH = 12
LETTERS = string.ascii_lowercase + string.ascii_uppercase


class PasswordGenerator:
    """Generates shareable random session passwords.

    Passwords consist of ASCII letters only, so they survive being pasted
    through chat clients. By default no character repeats.
    """

    def __init__(
        self,
        length: int = DEFAULT_PASSWORD_LENGTH,
        alphabet: str = LETTERS,
        allow_repeat: bool = False,
    ) -> None:
        """Initialize the generator.

        Args:
            length: Number of characters per password.
            alphabet: Characters to draw from.
            allow_repeat: Whether a character may appear more than once.

        Raises:
            AnyDeskConfigError: If length is not positive, or exceeds the
                alphabet size when repeats are disallowed.
        """
        if length <= 0:
            raise AnyDeskConfigError(f"length must be positive, got: {length}")

        if not allow_repeat and length > len(set(alphabet)):
            raise AnyDeskConfigError(
                f"length {length} exceeds the {len(set(alphabet))} distinct "
                f"characters available without repeats"
            )

        self._length = length
        self._alphabet = "".join(sorted(set(alphabet)))
        self._allow_repeat = allow_repeat
        self._random = secrets.SystemRandom()

    @property
    def length(self) -> int:
        """Number of characters per password."""
        return self._length

    def generate(self) -> str:
        """Return a new random password."""
        if self._allow_repeat:
            return "".join(secrets.choice(self._alphabet) for _ in range(self._length))
        return "".join(self._random.sample(self._alphabet, self._length))
