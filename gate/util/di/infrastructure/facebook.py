"""Facebook infrastructure providers."""

from dishka import Scope, provide

from gate.adapter.facebook import RealFacebookGateway
from gate.config import ConfigurationError, FacebookSettings
from gate.domain.service import FacebookGateway
from gate.util.di.base import ProviderBase


class FacebookProvider(ProviderBase):
    """Facebook component base."""

    __mock_component__ = "facebook"


class ProdFacebookProvider(FacebookProvider):
    """Production Facebook provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_facebook_gateway(self, settings: FacebookSettings) -> FacebookGateway:
        """Provide Facebook Graph API gateway.

        Raises:
            ConfigurationError: If Facebook app credentials are not configured
        """
        if not settings.client_id:
            raise ConfigurationError("Facebook client ID must be configured")
        if not settings.client_secret:
            raise ConfigurationError("Facebook client secret must be configured")

        return RealFacebookGateway(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            graph_url=settings.graph_url,
            timeout=settings.timeout,
        )
