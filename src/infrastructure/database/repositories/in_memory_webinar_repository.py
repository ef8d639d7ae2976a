"""In-memory implementation of webinar repository."""

from typing import Optional

from domain.entities import Webinar
from domain.errors import WebinarAlreadyExistsError, WebinarNotFoundError
from domain.repositories import IWebinarRepository


class InMemoryWebinarRepository(IWebinarRepository):
    """
    Dict-backed webinar repository.

    Stores copies of the entities it receives, so mutating a webinar after
    create() has no effect until update() is called.
    """

    def __init__(self, webinars: Optional[list[Webinar]] = None):
        self.database: dict[str, Webinar] = {}
        for webinar in webinars or []:
            self.database[webinar.id] = webinar.copy()

    async def create(self, webinar: Webinar) -> None:
        if webinar.id in self.database:
            raise WebinarAlreadyExistsError(webinar.id)
        self.database[webinar.id] = webinar.copy()

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        webinar = self.database.get(webinar_id)
        return webinar.copy() if webinar is not None else None

    async def update(self, webinar: Webinar) -> None:
        if webinar.id not in self.database:
            raise WebinarNotFoundError(webinar.id)
        self.database[webinar.id] = webinar.copy()
