import logging

import azure.functions as func

from cineniche_recommendation_service.blueprints import recommendations_blueprint
from cineniche_recommendation_service.blueprints.recommendations_bp import get_recommendation_service

logger = logging.getLogger(__name__)

app = func.FunctionApp()

app.register_blueprint(recommendations_blueprint)

# Load the collaborative table now so a missing or malformed file stops the host
try:
    get_recommendation_service()
except Exception:
    logger.critical("Failed to initialize recommendation service", exc_info=True)
    raise
