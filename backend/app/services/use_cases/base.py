"""
Base use case class following Clean Architecture principles.

Each use case encapsulates a single business operation and is independent
of HTTP details, so it can be driven from a route, a CLI or a test with the
same request object.

Example:
    >>> class StatusUseCase(UseCase[str, StatusResult]):
    ...     async def execute(self, request: str) -> StatusResult:
    ...         ...
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """
    Base use case abstract class.

    Type Parameters:
        RequestT: Type of the input request object
        ResponseT: Type of the output response object
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        HTTP exceptions are never raised here; translating results into HTTP
        answers is the route's job.
        """
        pass
