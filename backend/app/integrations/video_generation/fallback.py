"""Contextual demo assets returned when no provider produces a result."""

from dataclasses import dataclass

from .types import AssetKind, GeneratedAsset

SAMPLE_BUCKET = "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample"


@dataclass(frozen=True)
class DemoCategory:
    name: str
    keywords: tuple[str, ...]
    video_url: str
    thumbnail_url: str
    description: str


URBAN = DemoCategory(
    name="urban",
    keywords=("rain", "weather", "city", "street"),
    video_url=f"{SAMPLE_BUCKET}/ForBiggerBlazes.mp4",
    thumbnail_url="https://i.ytimg.com/vi/MNn9qKG2UFI/maxresdefault.jpg",
    description="City scene with atmospheric lighting",
)
NATURE = DemoCategory(
    name="nature",
    keywords=("nature", "forest", "landscape"),
    video_url=f"{SAMPLE_BUCKET}/ElephantsDream.mp4",
    thumbnail_url="https://i.ytimg.com/vi/eRsGyueVLvQ/maxresdefault.jpg",
    description="Natural landscape scene",
)
CHARACTER = DemoCategory(
    name="character",
    keywords=("walking", "person", "man", "woman"),
    video_url=f"{SAMPLE_BUCKET}/BigBuckBunny.mp4",
    thumbnail_url="https://i.ytimg.com/vi/YE7VzlLtp-4/maxresdefault.jpg",
    description="Character-focused scene",
)
MOTION = DemoCategory(
    name="motion",
    keywords=(),
    video_url=f"{SAMPLE_BUCKET}/SubaruOutbackOnStreetAndDirt.mp4",
    thumbnail_url="https://i.ytimg.com/vi/pWvoFBZKHdw/maxresdefault.jpg",
    description="Dynamic motion scene",
)


class FallbackSelector:
    """Maps a prompt to one of the pre-hosted demo videos.

    Matching is a case-insensitive substring test against each category's
    keywords; the first matching category wins. Plain substrings are used,
    so "woman" also matches the "man" keyword and "streetlight" matches
    "street".
    """

    def __init__(
        self,
        categories: tuple[DemoCategory, ...] = (URBAN, NATURE, CHARACTER),
        default: DemoCategory = MOTION,
        error_category: DemoCategory = CHARACTER,
    ):
        self.categories = categories
        self.default = default
        self.error_category = error_category

    def categorize(self, prompt: str) -> DemoCategory:
        lowered = prompt.lower()
        for category in self.categories:
            if any(keyword in lowered for keyword in category.keywords):
                return category
        return self.default

    def pick(self, prompt: str) -> GeneratedAsset:
        return self._to_asset(self.categorize(prompt))

    def error_asset(self) -> GeneratedAsset:
        """Asset served when generation blew up before a category could be chosen."""
        return self._to_asset(self.error_category)

    @staticmethod
    def _to_asset(category: DemoCategory) -> GeneratedAsset:
        return GeneratedAsset(
            url=category.video_url,
            thumbnail_url=category.thumbnail_url,
            kind=AssetKind.VIDEO,
            is_demo=True,
            description=category.description,
        )
