# -*- coding: utf-8 -*-
"""Exceptions raised by the AHP engine."""


class AHPError(Exception):
    """Base class for engine errors."""


class NotFoundError(AHPError, LookupError):
    """An alternative referenced by name was never added to the model."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f'{kind.capitalize()} "{name}" not found')
