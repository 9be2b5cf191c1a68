"""Search people use case."""

from pydantic import BaseModel, Field

from pod.application.usecase.base import BaseUseCase
from pod.application.usecase.person import PersonResponse
from pod.domain.service import SearchService


class SearchPeopleRequest(BaseModel):
    """Search people request."""

    query: str = Field(max_length=255)


class SearchPeopleResponse(BaseModel):
    """Search people response."""

    query: str
    people: list[PersonResponse]


class SearchPeopleUseCase(BaseUseCase):
    """Use case for finding people by name."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: SearchPeopleRequest) -> SearchPeopleResponse:
        identities = await self.search_service.search(request.query)
        return SearchPeopleResponse(
            query=request.query,
            people=[PersonResponse.from_identity(i) for i in identities],
        )
