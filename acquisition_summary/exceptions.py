#!/usr/bin/env python
# -*- coding: utf-8 -*-

from typing import Iterable

###############################################################################


class UnknownSummaryFieldError(AttributeError):
    """
    Raised when a field name is not one of the summary metadata fields.
    """

    def __init__(self, name: str, allowed: Iterable[str]):
        super().__init__(name)
        self.name = name
        self.allowed = sorted(allowed)

    def __str__(self) -> str:
        return (
            f"Cannot set field '{self.name}'. "
            f"Only predefined fields are allowed: {', '.join(self.allowed)}"
        )
