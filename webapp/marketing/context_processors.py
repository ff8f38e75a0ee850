from django.conf import settings


def site(request):
    """Expose site name and page metadata to every template."""
    return {
        "site_name": settings.SITE_NAME,
        "site_title": settings.SITE_TITLE,
        "site_description": settings.SITE_DESCRIPTION,
    }
