import asyncio
from collections.abc import Callable
from typing import Annotated, Concatenate, ParamSpec, TypeVar

from fastapi import Depends
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from strawberry.fastapi import BaseContext

from app.db.session import get_db

P = ParamSpec("P")
R = TypeVar("R")


class GraphQLContext(BaseContext):
    """Per-request resolver context carrying the request's database session."""

    def __init__(self, db: Session) -> None:
        super().__init__()
        self.db: Session = db
        # sibling resolvers run concurrently but a Session is not thread-safe
        self._db_lock = asyncio.Lock()

    async def run(
        self,
        fn: Callable[Concatenate[Session, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Run a blocking gateway call in the threadpool with this request's session."""
        async with self._db_lock:
            return await run_in_threadpool(fn, self.db, *args, **kwargs)


async def get_context(db: Annotated[Session, Depends(get_db)]) -> GraphQLContext:
    return GraphQLContext(db)
