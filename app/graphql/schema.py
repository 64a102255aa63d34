"""
Main GraphQL schema definition using Strawberry
"""

from graphql import GraphQLError
import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext
from typing_extensions import override

from app.core.config import Settings
from app.core.errors import LibraryError
from app.core.logging import get_logger
from app.graphql.context import GraphQLContext, get_context
from app.graphql.mutations import Mutation
from app.graphql.queries import Query

logger = get_logger(__name__)


class LibrarySchema(strawberry.Schema):
    """Schema that logs domain rejections quietly and real failures loudly."""

    @override
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if original is None or isinstance(original, LibraryError):
                logger.info("GraphQL request rejected: %s", error.message)
            else:
                logger.error(
                    "GraphQL execution error: %s", error.message, exc_info=original
                )


schema = LibrarySchema(query=Query, mutation=Mutation)


def create_graphql_router(settings: Settings) -> GraphQLRouter[GraphQLContext, None]:
    """Create the GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path=settings.GRAPHQL_PATH,
        graphql_ide="graphiql" if settings.GRAPHQL_IDE else None,
        context_getter=get_context,
    )
