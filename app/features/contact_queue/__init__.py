"""
Contact queue feature package.

This vertical slice keeps every layer of the outreach queue co-located
(domain models, the pure ranking pipeline, the service facade, display
views, and the API router) so contributors can navigate the feature
without hunting through global folders.
"""

# Re-export the primary building blocks for easy access.
from .api.router import router as contact_queue_router  # noqa: F401
from .domain.models import ContactRecord, QueueItem  # noqa: F401
from .service import ContactQueueService, contact_queue_service  # noqa: F401
