from dependency_injector import containers, providers

from controllers import OffboardingFormController
from models import DEFAULT_CATALOGS
from repositories.rest import RestDirectoryRepository, RestSubmissionRepository


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(packages=['blueprints'])

    config = providers.Configuration(
        default={
            'svc': {
                'webhook': {
                    'url': 'http://localhost:8080/exec',
                    'token_provider': None,
                    'timeout': 30.0,
                },
            },
            'search': {
                'debounce_seconds': 0.5,
                'min_query_length': 3,
            },
        }
    )

    catalogs = providers.Object(DEFAULT_CATALOGS)

    directory_repo = providers.ThreadSafeSingleton(
        RestDirectoryRepository,
        base_url=config.svc.webhook.url,
        token_provider=config.svc.webhook.token_provider,
        timeout=config.svc.webhook.timeout,
    )

    submission_repo = providers.ThreadSafeSingleton(
        RestSubmissionRepository,
        base_url=config.svc.webhook.url,
        token_provider=config.svc.webhook.token_provider,
        timeout=config.svc.webhook.timeout,
    )

    form_controller = providers.ThreadSafeSingleton(
        OffboardingFormController,
        directory_repo=directory_repo,
        submission_repo=submission_repo,
        catalogs=catalogs,
        debounce_seconds=config.search.debounce_seconds,
        min_query_length=config.search.min_query_length,
    )
