import logging
import os

from flask import Flask

from blueprints import BlueprintCatalogs, BlueprintHealth, BlueprintOffboarding
from containers import Container
from repositories.rest import StaticTokenProvider


class FlaskMicroservice(Flask):
    container: Container


def create_app() -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':  # pragma: no cover
        from gcp_microservice_utils import setup_cloud_logging  # noqa: PLC0415

        setup_cloud_logging()
    else:
        logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO'))

    app = FlaskMicroservice(__name__)
    app.container = Container()

    if 'OFFBOARDING_WEBHOOK_URL' in os.environ:  # pragma: no cover
        app.container.config.svc.webhook.url.from_env('OFFBOARDING_WEBHOOK_URL')

        if 'OFFBOARDING_WEBHOOK_TOKEN' in os.environ:
            app.container.config.svc.webhook.token_provider.from_value(
                StaticTokenProvider(os.environ['OFFBOARDING_WEBHOOK_TOKEN'])
            )

    if 'OFFBOARDING_HTTP_TIMEOUT' in os.environ:  # pragma: no cover
        app.container.config.svc.webhook.timeout.from_env('OFFBOARDING_HTTP_TIMEOUT', as_=float)

    if 'OFFBOARDING_DEBOUNCE_SECONDS' in os.environ:  # pragma: no cover
        app.container.config.search.debounce_seconds.from_env('OFFBOARDING_DEBOUNCE_SECONDS', as_=float)

    if os.getenv('ENABLE_CLOUD_TRACE') == '1':  # pragma: no cover
        from gcp_microservice_utils import setup_cloud_trace  # noqa: PLC0415

        setup_cloud_trace(app)

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintCatalogs)
    app.register_blueprint(BlueprintOffboarding)

    return app
