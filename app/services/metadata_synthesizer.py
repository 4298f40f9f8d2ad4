"""Template-based title, description and tag generation for a video topic."""

import logging
import random
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

TONES = (
    "Ultimate Guide",
    "Quick Tips",
    "Step-by-Step Tutorial",
    "Deep Dive",
    "2024 Update",
)

MAX_TAGS = 15
MIN_TOPIC_FRAGMENT_LENGTH = 3

CLOSING_LINE = "Subscribe for more weekly uploads!"

WHITESPACE = re.compile(r"\s+")


@dataclass
class GeneratedMetadata:
    """Suggested metadata for one video."""

    title: str
    description: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MetadataSynthesizer:
    """Builds video metadata from a topic and a keyword list."""

    def __init__(self, rng: Optional[random.Random] = None):
        # Anything with a ``choice`` method works; tests pass a seeded Random.
        self._rng = rng or random.Random()

    def synthesize(self, topic: str, keywords: List[str]) -> GeneratedMetadata:
        """
        Generate title, description and tags.

        Args:
            topic: Validated video topic
            keywords: Sanitized keyword list

        Returns:
            GeneratedMetadata with a randomly toned title
        """
        metadata = GeneratedMetadata(
            title=self.build_title(topic, keywords),
            description=self.build_description(topic, keywords),
            tags=self.build_tags(topic, keywords),
        )
        logger.debug(f"Synthesized title: {metadata.title}")
        return metadata

    def build_title(self, topic: str, keywords: List[str]) -> str:
        base = topic.strip()
        tone = self._rng.choice(TONES)

        keyword = keywords[0] if keywords else None
        if keyword and keyword.lower() not in base.lower():
            return f"{base} – {tone} for {keyword}"

        return f"{base} – {tone}"

    def build_description(self, topic: str, keywords: List[str]) -> str:
        subject = topic.lower()

        headline = f"In this video, we explore {subject}."
        takeaways = "\n".join(
            [
                f"Learn how to apply {subject} with actionable steps.",
                f"Discover modern strategies so you can implement {subject} today.",
                "Stay until the end for pro tips and resources you can instantly apply.",
            ]
        )

        keyword_line = ""
        if keywords:
            hashtags = " ".join("#" + WHITESPACE.sub("", item) for item in keywords)
            keyword_line = f"Keywords: {hashtags}"

        sections = [headline, takeaways, keyword_line, CLOSING_LINE]
        return "\n\n".join(section for section in sections if section.strip())

    def build_tags(self, topic: str, keywords: List[str]) -> List[str]:
        fragments = [fragment.strip() for fragment in topic.lower().split(" ")]
        topic_fragments = [
            fragment
            for fragment in fragments
            if len(fragment) >= MIN_TOPIC_FRAGMENT_LENGTH
        ]

        combined = [keyword.lower() for keyword in keywords] + topic_fragments
        # dict preserves first-occurrence order
        return list(dict.fromkeys(combined))[:MAX_TAGS]
