"""External API Integrations."""

from wizarding.infrastructure.integrations.hp_api.hp_api_client import HpApiClient
from wizarding.infrastructure.integrations.potterapi.potterapi_client import PotterApiClient
from wizarding.infrastructure.integrations.potterdb.potterdb_client import PotterDbClient

__all__ = ["HpApiClient", "PotterApiClient", "PotterDbClient"]
