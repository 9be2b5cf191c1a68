"""Domain layer DI providers."""

from dishka import Scope, provide

from pod.config import FederationSettings, PodSettings, SearchSettings
from pod.domain.repository import (
    CommentRepository,
    ContactRepository,
    IdentityRepository,
    IdentitySearchIndex,
    LocalUserRepository,
    PostRepository,
    UnitOfWork,
)
from pod.domain.service import (
    ContactService,
    IdentityResolver,
    IdentityService,
    LifecycleService,
    PostService,
    ProfileFetcher,
    SearchService,
)
from pod.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_resolver(
        self,
        identity_repository: IdentityRepository,
        profile_fetcher: ProfileFetcher,
        pod_settings: PodSettings,
        federation_settings: FederationSettings,
    ) -> IdentityResolver:
        """Provide identity resolver."""
        return IdentityResolver(
            identity_repository=identity_repository,
            profile_fetcher=profile_fetcher,
            pod_settings=pod_settings,
            federation_settings=federation_settings,
        )

    @provide
    def get_identity_service(
        self,
        identity_repository: IdentityRepository,
        local_user_repository: LocalUserRepository,
        unit_of_work: UnitOfWork,
        pod_settings: PodSettings,
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            identity_repository=identity_repository,
            local_user_repository=local_user_repository,
            unit_of_work=unit_of_work,
            pod_settings=pod_settings,
        )

    @provide
    def get_search_service(
        self, search_index: IdentitySearchIndex, search_settings: SearchSettings
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(search_index=search_index, search_settings=search_settings)

    @provide
    def get_contact_service(
        self,
        contact_repository: ContactRepository,
        identity_repository: IdentityRepository,
        local_user_repository: LocalUserRepository,
    ) -> ContactService:
        """Provide contact domain service."""
        return ContactService(
            contact_repository=contact_repository,
            identity_repository=identity_repository,
            local_user_repository=local_user_repository,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_lifecycle_service(
        self,
        identity_repository: IdentityRepository,
        local_user_repository: LocalUserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        contact_repository: ContactRepository,
        contact_service: ContactService,
        unit_of_work: UnitOfWork,
    ) -> LifecycleService:
        """Provide lifecycle domain service."""
        return LifecycleService(
            identity_repository=identity_repository,
            local_user_repository=local_user_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            contact_repository=contact_repository,
            contact_service=contact_service,
            unit_of_work=unit_of_work,
        )
