"""Identifier generators."""

from uuid import uuid4

from application.interfaces import IIdGenerator


class UUIDIdGenerator(IIdGenerator):
    """Generates random UUID4 identifiers."""

    def generate(self) -> str:
        return str(uuid4())


class FixedIdGenerator(IIdGenerator):
    """Always returns the same identifier. Meant for tests."""

    def __init__(self, value: str = "id-1"):
        self.value = value

    def generate(self) -> str:
        return self.value
