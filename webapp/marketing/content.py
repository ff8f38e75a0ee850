"""
Static page content: feature cards, privacy policy sections and outbound links.
"""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    label: str
    href: str
    external: bool = True


@dataclass(frozen=True)
class FeatureCard:
    icon: str
    tint: str
    title: str
    description: str

    @property
    def icon_template(self):
        return f"marketing/icons/{self.icon}.svg"


@dataclass(frozen=True)
class PolicySection:
    """One numbered section of the privacy policy.

    ``paragraphs`` hold trusted markup and are rendered unescaped.
    ``items`` is a plain bullet list, ``links`` a boxed list of outbound links
    and ``contact`` an emphasised line at the end of the section.
    """
    heading: str
    paragraphs: tuple = ()
    items: tuple = ()
    links: tuple = ()
    contact: str = ""


# =============================================================================
# OUTBOUND LINKS
# =============================================================================

APP_STORE_URL = "https://play.google.com/store/apps/details?id=com.snapplay.offline.games"
DEVELOPER_URL = "https://sarankar.com"
SUPPORT_EMAIL = "support@sarankar.com"
SUPPORT_URL = f"mailto:{SUPPORT_EMAIL}"
GOOGLE_PLAY_SERVICES_PRIVACY_URL = "https://policies.google.com/privacy"
ADMOB_PRIVACY_URL = "https://support.google.com/admob/answer/6128543?hl=en"

# In-page anchor for the feature grid
FEATURES_ANCHOR = "features"

COPYRIGHT_YEAR = 2026
POLICY_LAST_UPDATED = datetime.date(2026, 2, 16)


# =============================================================================
# LANDING PAGE
# =============================================================================

FEATURES = (
    FeatureCard(
        icon="zap",
        tint="yellow",
        title="Zero Internet Needed",
        description="Every game works 100% offline. Perfect for flights, road trips, or when you're out of data.",
    ),
    FeatureCard(
        icon="users",
        tint="blue",
        title="Multiplayer Madness",
        description="Challenge friends on the same device (Pass & Play) or connect via Bluetooth for local battles.",
    ),
    FeatureCard(
        icon="trophy",
        tint="purple",
        title="Global Leaderboards",
        description="Climb the ranks and prove your skills in daily challenges.",
    ),
)


# =============================================================================
# PRIVACY POLICY
# =============================================================================

THIRD_PARTY_SERVICES = (
    Link("Google Play Services", GOOGLE_PLAY_SERVICES_PRIVACY_URL),
    Link("AdMob", ADMOB_PRIVACY_URL),
)

POLICY_SECTIONS = (
    PolicySection(
        heading="Introduction",
        paragraphs=(
            'Sarankar Developers ("we", "our", or "us") is committed to protecting your privacy. '
            "This Privacy Policy applies to our mobile applications, including <strong>SnapPlay</strong>, "
            "<strong>Amozea</strong>, and any other apps published by us on the Google Play Store. "
            "By using our applications, you signify that you have read, understood, and agree to our "
            "collection, storage, use, and disclosure of your personal information as described in "
            "this Privacy Policy.",
        ),
    ),
    PolicySection(
        heading="Information Collection",
        paragraphs=(
            "<strong>Personal Information:</strong> We do not collect any personally identifiable "
            "information (PII) such as your name, address, or phone number unless you explicitly "
            "provide it to us for support purposes.",
            "<strong>Device Information:</strong> We may collect non-personal information about the "
            "device you use to access our apps, including device model, operating system version, "
            "and unique device identifiers (like Android Advertising ID). This is primarily used for "
            "ad delivery and analytics.",
        ),
    ),
    PolicySection(
        heading="Use of Information",
        paragraphs=("We use the information we collect to:",),
        items=(
            "Provide and maintain our applications.",
            "Show relevant advertisements via Google AdMob.",
            "Analyze usage patterns to improve the user experience.",
            "Communicate with you regarding support requests.",
        ),
    ),
    PolicySection(
        heading="Third-Party Services",
        paragraphs=(
            "Our apps use third-party services that may collect information used to identify you:",
        ),
        links=THIRD_PARTY_SERVICES,
    ),
    PolicySection(
        heading="Data Retention",
        paragraphs=(
            "We do not store your personal data on our servers. Any app-specific progress, settings, "
            "or favorites (like saved wallpapers) are stored locally on your device.",
        ),
    ),
    PolicySection(
        heading="Contact Us",
        paragraphs=("If you have any questions about this Privacy Policy, please contact us at:",),
        contact=SUPPORT_EMAIL,
    ),
)
