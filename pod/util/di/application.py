"""Application layer DI providers."""

from dishka import Scope, provide

from pod.application.usecase.contact import AddContactUseCase, RemoveContactUseCase
from pod.application.usecase.identity import (
    DestroyIdentityUseCase,
    ExportIdentityUseCase,
    ResolveIdentityUseCase,
    SearchPeopleUseCase,
)
from pod.application.usecase.user import (
    ProvisionLocalUserUseCase,
    UpdateProfileUseCase,
)
from pod.domain.service import (
    ContactService,
    IdentityResolver,
    IdentityService,
    LifecycleService,
    SearchService,
)
from pod.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Identity use cases
    @provide
    def get_resolve_identity_use_case(
        self, identity_resolver: IdentityResolver
    ) -> ResolveIdentityUseCase:
        """Provide resolve identity use case."""
        return ResolveIdentityUseCase(identity_resolver=identity_resolver)

    @provide
    def get_search_people_use_case(
        self, search_service: SearchService
    ) -> SearchPeopleUseCase:
        """Provide search people use case."""
        return SearchPeopleUseCase(search_service=search_service)

    @provide
    def get_export_identity_use_case(
        self, identity_service: IdentityService
    ) -> ExportIdentityUseCase:
        """Provide export identity use case."""
        return ExportIdentityUseCase(identity_service=identity_service)

    @provide
    def get_destroy_identity_use_case(
        self, lifecycle_service: LifecycleService
    ) -> DestroyIdentityUseCase:
        """Provide destroy identity use case."""
        return DestroyIdentityUseCase(lifecycle_service=lifecycle_service)

    # User use cases
    @provide
    def get_provision_local_user_use_case(
        self, identity_service: IdentityService
    ) -> ProvisionLocalUserUseCase:
        """Provide provision local user use case."""
        return ProvisionLocalUserUseCase(identity_service=identity_service)

    @provide
    def get_update_profile_use_case(
        self, identity_service: IdentityService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(identity_service=identity_service)

    # Contact use cases
    @provide
    def get_add_contact_use_case(
        self,
        identity_resolver: IdentityResolver,
        contact_service: ContactService,
    ) -> AddContactUseCase:
        """Provide add contact use case."""
        return AddContactUseCase(
            identity_resolver=identity_resolver, contact_service=contact_service
        )

    @provide
    def get_remove_contact_use_case(
        self, lifecycle_service: LifecycleService
    ) -> RemoveContactUseCase:
        """Provide remove contact use case."""
        return RemoveContactUseCase(lifecycle_service=lifecycle_service)
