"""Fluent string manipulation helper.

Each operation returns a new TextHelper, so calls can be chained:

    TextHelper.create(" this_is_snake_case").extended_trim().snake_to_lower_camel()
    # -> thisIsSnakeCase
"""

from dataclasses import dataclass
from typing import Any

# ASCII whitespace and NUL, plus the non-breaking space
TRIM_CHARACTERS = " \t\n\r\0\x0b\u00a0"


@dataclass(frozen=True)
class TextHelper:
    """Immutable string value with chainable manipulation methods."""

    value: str = ""

    def __post_init__(self):
        if not isinstance(self.value, str):
            object.__setattr__(self, "value", str(self.value))

    @classmethod
    def create(cls, value: Any = "") -> "TextHelper":
        """Create a helper for any value; non-strings are converted with str()."""
        return cls(value)

    @property
    def is_multibyte(self) -> bool:
        """True when the value needs more than one byte per character in UTF-8."""
        return not self.value.isascii()

    def append(self, appendix: Any) -> "TextHelper":
        """Append a value to the end."""
        return TextHelper(self.value + str(appendix))

    def prepend(self, prefix: Any) -> "TextHelper":
        """Prepend a value to the start."""
        return TextHelper(str(prefix) + self.value)

    def insert(self, value: Any, position: int) -> "TextHelper":
        """
        Insert a value at a UTF-8 byte offset.

        The offset starts at zero; negative offsets count from the end.

        Raises:
            ValueError: If the offset falls inside a multibyte character.
        """
        raw = self.value.encode("utf-8")
        try:
            prefix = raw[:position].decode("utf-8")
            appendix = raw[position:].decode("utf-8")
        except UnicodeDecodeError:
            raise ValueError(
                f"Byte offset {position} splits a multibyte character"
            ) from None
        return TextHelper(prefix + str(value) + appendix)

    def shorten(self, max_characters: int, obey_word_boundaries: bool = False) -> "TextHelper":
        """
        Shorten the value to at most max_characters characters.

        Args:
            max_characters: Maximum length.
            obey_word_boundaries: Also cut back to the last space, unless
                that space is the first character.
        """
        if max_characters < 0:
            raise ValueError("max_characters must not be negative")
        if len(self.value) <= max_characters:
            return self

        shortened = self.value[:max_characters]
        if obey_word_boundaries:
            pos = shortened.rfind(" ")
            if pos > 0:
                shortened = shortened[:pos]
        return TextHelper(shortened)

    def snake_to_upper_camel(self) -> "TextHelper":
        """Convert snake_case to UpperCamelCase."""
        words = self.value.replace("_", " ").split(" ")
        return TextHelper("".join(word[:1].upper() + word[1:] for word in words))

    def snake_to_lower_camel(self) -> "TextHelper":
        """Convert snake_case to lowerCamelCase."""
        upper = self.snake_to_upper_camel().value
        return TextHelper(upper[:1].lower() + upper[1:])

    def camel_to_snake(self) -> "TextHelper":
        """
        Convert camelCase to snake_case.

        Raises:
            NotImplementedError: Always; the conversion is not supported.
        """
        raise NotImplementedError("camel_to_snake is not implemented")

    def extended_trim(self) -> "TextHelper":
        """Like str.strip(), but also removes non-breaking spaces."""
        return TextHelper(self.value.strip(TRIM_CHARACTERS))

    def replace_first(self, search: str, replace: str) -> "TextHelper":
        """Replace the first occurrence of search."""
        if not search:
            return self
        return TextHelper(self.value.replace(search, replace, 1))

    def to_string(self) -> str:
        """Return the plain string value."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)
