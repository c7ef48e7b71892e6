from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from inventory_api.core.config import get_limiter_storage_uri

READ_LIMIT = "100 per minute"
WRITE_LIMIT = "30 per minute"

# Global Limiter instance to be imported by controllers.
# create_app() binds it and applies RATE_LIMIT_ENABLED; only decorated
# routes are limited.
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=get_limiter_storage_uri(),
    enabled=True,
)
