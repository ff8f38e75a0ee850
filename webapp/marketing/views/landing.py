"""Landing and privacy policy page views."""
import logging

from django.shortcuts import render
from django.views.decorators.http import require_safe

from .. import content

logger = logging.getLogger(__name__)


@require_safe
def landing_page(request):
    """Render the landing page."""
    logger.debug("Rendering landing page with %d feature cards", len(content.FEATURES))
    return render(request, "marketing/landing.html", {
        "app_store_url": content.APP_STORE_URL,
        "developer_url": content.DEVELOPER_URL,
        "support_url": content.SUPPORT_URL,
        "features_anchor": content.FEATURES_ANCHOR,
        "features": content.FEATURES,
        "copyright_year": content.COPYRIGHT_YEAR,
    })


@require_safe
def privacy_page(request):
    """Render the privacy policy page."""
    logger.debug("Rendering privacy policy with %d sections", len(content.POLICY_SECTIONS))
    return render(request, "marketing/privacy.html", {
        "sections": content.POLICY_SECTIONS,
        "last_updated": content.POLICY_LAST_UPDATED,
    })
