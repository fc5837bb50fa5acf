"""AAStar community branding and public links."""

from types import MappingProxyType
from typing import Mapping

LOGO_URL = "https://raw.githubusercontent.com/jhfnetboy/MarkDownImg/main/img/202505031325963.png"
ICON_URL = "https://www.aastar.io/favicon.ico"

COLORS: Mapping[str, str] = MappingProxyType(
    {
        "primary": "#FF6B35",
        "primaryLight": "#FF8C42",
        "secondary": "#4A90E2",
        "secondaryDark": "#357ABD",
        "success": "#4CAF50",
        "warning": "#FFC107",
        "error": "#F44336",
        "gray50": "#F9FAFB",
        "gray100": "#F3F4F6",
        "gray700": "#374151",
        "gray800": "#1F2937",
        "gray900": "#111827",
    }
)

BRANDING: Mapping[str, object] = MappingProxyType(
    {
        "logo": LOGO_URL,
        "icon": ICON_URL,
        "colors": COLORS,
    }
)

LINKS: Mapping[str, str] = MappingProxyType(
    {
        "main": "https://aastar.io",
        "airAccount": "https://airAccount.aastar.io",
        "superPaymaster": "https://superpaymaster.aastar.io",
        "demo": "https://aastar.io/demo",
        "github": "https://github.com/AAStarCommunity",
        "discord": "https://discord.gg/aastar",
        "twitter": "https://twitter.com/AAStarCommunity",
    }
)
