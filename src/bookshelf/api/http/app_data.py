from dataclasses import dataclass

from src.bookshelf.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
