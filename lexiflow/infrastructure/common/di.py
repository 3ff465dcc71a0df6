"""Glue between the dependency container and FastAPI's dependency system."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from lexiflow.core import Container, container
from lexiflow.database import DatabaseSession

T = TypeVar("T")


@contextmanager
def request_scope(db: Session) -> Iterator[Container]:
    """Bind a request's database session to the container while the block runs."""
    with container.db.override(db):
        yield container


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    Repositories built by the provider share the request's session, so a use
    case and everything it calls commit through one transaction scope.
    """

    def dependency(db: DatabaseSession) -> T:
        with request_scope(db):
            return provider()

    return dependency
