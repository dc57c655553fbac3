"""Capture of localized messages for diagnostics.

Each localize call can be recorded as a LocalizedLog: which resource and
key were used, what message came back and where the call was made. Running
an application's unit tests with a recorder attached lists every resource
entry the application needs, and flags a localize key that is used for two
different messages in the same culture (a key that will be translated
wrongly for one of them).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "InMemoryLocalizationRecorder",
    "LocalizationRecorder",
    "LocalizedLog",
]


@dataclass(slots=True)
class LocalizedLog:
    """One localize call.

    Only same_key_but_diff_format is ever changed after creation, and only
    by the recorder.

    Attributes:
        resource_class_name: Resource the message belongs to
        localize_key: Composed localize key
        culture: Active culture of the call
        actual_message: Message returned to the caller
        message_format: Raw format string(s) for formatted messages, else None
        calling_class_name: Class the call came from
        calling_method_name: Method the call came from
        source_line_number: Line the call came from
        same_key_but_diff_format: None when the key was seen for the first
            time, True when it was seen before with a different message,
            False when it was seen before with the same message
    """

    resource_class_name: str
    localize_key: str
    culture: str
    actual_message: str
    message_format: str | None
    calling_class_name: str
    calling_method_name: str
    source_line_number: int
    same_key_but_diff_format: bool | None = None

    @property
    def message_shape(self) -> str:
        """Format string when there is one, otherwise the message itself."""
        return self.message_format if self.message_format is not None else self.actual_message


class LocalizationRecorder(Protocol):
    """Protocol for collaborators receiving LocalizedLog entries."""

    def record(self, entry: LocalizedLog) -> None:
        """Store a LocalizedLog entry."""
        ...


class InMemoryLocalizationRecorder:
    """Keeps LocalizedLog entries in memory and checks key consistency.

    Example:
        >>> recorder = InMemoryLocalizationRecorder()
        >>> localizer = DefaultLocalizer(options, recorder=recorder)
        >>> ...  # run the code under test
        >>> for problem in recorder.possible_errors:
        ...     print(problem)
    """

    __slots__ = ("_entries", "_lock", "_possible_errors", "_shapes")

    def __init__(self) -> None:
        self._entries: list[LocalizedLog] = []
        self._possible_errors: list[str] = []
        self._shapes: dict[tuple[str, str, str], str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[LocalizedLog, ...]:
        """Recorded entries in call order."""
        return tuple(self._entries)

    @property
    def possible_errors(self) -> tuple[str, ...]:
        """One line per entry whose key was reused for a different message."""
        return tuple(self._possible_errors)

    @property
    def possible_error(self) -> str | None:
        """Most recent possible error, or None when there is none."""
        return self._possible_errors[-1] if self._possible_errors else None

    def record(self, entry: LocalizedLog) -> None:
        """Store entry, flagging it if its key was used for another message."""
        identity = (entry.resource_class_name, entry.localize_key, entry.culture)
        with self._lock:
            previous = self._shapes.get(identity)
            if previous is None:
                self._shapes[identity] = entry.message_shape
            elif previous == entry.message_shape:
                entry.same_key_but_diff_format = False
            else:
                entry.same_key_but_diff_format = True
                self._possible_errors.append(
                    f"The localize key '{entry.localize_key}' in resource "
                    f"'{entry.resource_class_name}' was used with '{previous}' and "
                    f"'{entry.message_shape}'. Called from {entry.calling_class_name}."
                    f"{entry.calling_method_name}, line {entry.source_line_number}."
                )
            self._entries.append(entry)

    def find(self, localize_key: str) -> tuple[LocalizedLog, ...]:
        """Return the entries recorded for localize_key."""
        return tuple(entry for entry in self._entries if entry.localize_key == localize_key)

    def clear(self) -> None:
        """Forget all entries and possible errors."""
        with self._lock:
            self._entries.clear()
            self._possible_errors.clear()
            self._shapes.clear()
