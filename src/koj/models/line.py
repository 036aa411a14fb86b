"""A single line of Gurbani, as returned by a line lookup"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SectionMeta:
    """Where a Shabad sits in its source, used for citations"""

    name: str
    writer_name: str | None = None
    page_name: str = "Ang"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SectionMeta":
        """Deserialize the section from a dictionary"""
        return cls(
            name=data.get("name", ""),
            writer_name=data.get("writer"),
            page_name=data.get("page", "Ang"),
        )


@dataclass
class LineRecord:
    """
    A line with its transliterations and translations.

    Language maps are keyed by language id, and are only populated when the
    lookup was asked to include them.
    """

    id: str
    shabad_id: str
    source_id: int
    source_page: int
    gurmukhi: str
    transliterations: dict[int, str] = field(default_factory=dict)
    translations: dict[int, str] = field(default_factory=dict)
    section: SectionMeta | None = None

    def transliteration(self, language_id: int | None) -> str | None:
        """The transliteration for the language, if there is one"""
        if language_id is None:
            return None
        return self.transliterations.get(language_id)

    def translation(self, language_id: int | None) -> str | None:
        """The translation for the language, if there is one"""
        if language_id is None:
            return None
        return self.translations.get(language_id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineRecord":
        """Deserialize the line from a dictionary loaded from JSON"""
        section = data.get("section")
        return cls(
            id=str(data["id"]),
            shabad_id=str(data["shabad_id"]),
            source_id=int(data.get("source_id", 1)),
            source_page=int(data.get("source_page", 0)),
            gurmukhi=data.get("gurmukhi", ""),
            transliterations={
                int(language): text
                for language, text in data.get("transliterations", {}).items()
            },
            translations={
                int(language): text
                for language, text in data.get("translations", {}).items()
            },
            section=SectionMeta.from_dict(section) if section else None,
        )
