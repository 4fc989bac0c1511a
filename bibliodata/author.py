"""Authors of bibliographic items."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Author:
    """A person credited with a work, identified by name and surname."""

    name: str = ""
    surname: str = ""

    def __str__(self) -> str:
        return f"{self.name} {self.surname}"

    def display(self, file: TextIO | None = None) -> None:
        """Write the author's full name followed by a newline."""
        print(self, file=file if file is not None else sys.stdout)