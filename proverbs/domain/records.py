"""Domain types and helpers for proverb records."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

# JSON key order written to disk.
FIELD_ORDER = ("id", "textDari", "textPashto", "translationEn", "meaning", "category")
REQUIRED_FIELDS = ("textDari", "textPashto", "translationEn", "category")

# Offered by the forms only; any submitted category is stored as-is.
CATEGORIES = ("wisdom", "friendship", "life", "family", "work", "patience", "humor")
DEFAULT_CATEGORY = "wisdom"


@dataclass
class ProverbRecord:
    id: int
    text_dari: str
    text_pashto: str
    translation_en: str
    meaning: str = ""
    category: str = DEFAULT_CATEGORY

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProverbRecord":
        """
        Build a record from its stored JSON shape without coercing values.
        Raises KeyError/TypeError/ValueError on bad input.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"proverb entry must be an object, got {type(data).__name__}")
        record_id = data["id"]
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            raise TypeError(f"id must be an integer, got {record_id!r}")
        if record_id <= 0:
            raise ValueError(f"id must be positive, got {record_id}")
        # meaning may be absent on disk; when present it must be text
        values = {"meaning": data.get("meaning", "")}
        for name in ("textDari", "textPashto", "translationEn", "category"):
            values[name] = data[name]
        for name, value in values.items():
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string, got {value!r}")
        return cls(
            id=record_id,
            text_dari=values["textDari"],
            text_pashto=values["textPashto"],
            translation_en=values["translationEn"],
            meaning=values["meaning"],
            category=values["category"],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "textDari": self.text_dari,
            "textPashto": self.text_pashto,
            "translationEn": self.translation_en,
            "meaning": self.meaning,
            "category": self.category,
        }


@dataclass
class ProverbDraft:
    """Editable fields of a proverb exactly as submitted by a form."""

    text_dari: str = ""
    text_pashto: str = ""
    translation_en: str = ""
    meaning: str = ""
    category: str = ""

    @classmethod
    def blank(cls) -> "ProverbDraft":
        return cls(category=DEFAULT_CATEGORY)

    @classmethod
    def from_record(cls, record: ProverbRecord) -> "ProverbDraft":
        return cls(
            text_dari=record.text_dari,
            text_pashto=record.text_pashto,
            translation_en=record.translation_en,
            meaning=record.meaning,
            category=record.category,
        )

    def form_data(self) -> dict:
        return {
            "textDari": self.text_dari,
            "textPashto": self.text_pashto,
            "translationEn": self.translation_en,
            "meaning": self.meaning,
            "category": self.category,
        }

    def missing_fields(self) -> list[str]:
        """Return JSON names of required fields left empty (whitespace counts as empty)."""
        data = self.form_data()
        return [name for name in REQUIRED_FIELDS if not (data.get(name) or "").strip()]

    def to_record(self, record_id: int) -> ProverbRecord:
        return ProverbRecord(
            id=record_id,
            text_dari=self.text_dari,
            text_pashto=self.text_pashto,
            translation_en=self.translation_en,
            meaning=self.meaning or "",
            category=self.category,
        )


def next_id(records: Iterable[ProverbRecord]) -> int:
    """max(existing ids) + 1, or 1 for an empty collection. Gaps are never reused."""
    return max((r.id for r in records), default=0) + 1


def find_index(records: list[ProverbRecord], record_id: int | None) -> int:
    if record_id is None:
        return -1
    for idx, record in enumerate(records):
        if record.id == record_id:
            return idx
    return -1


SEED_PROVERBS = [
    {
        "id": 1,
        "textDari": "با یک دست دو هندوانه نتوان گرفت",
        "textPashto": "په یوه الس دو هندوانې نه شي نیول کېدای",
        "translationEn": "You can't hold two watermelons in one hand",
        "meaning": "Don't take on more tasks than you can handle",
        "category": "wisdom",
    },
    {
        "id": 2,
        "textDari": "دوست از دوست بی نیاز",
        "textPashto": "ملګری له ملګري بې پروا",
        "translationEn": "A friend is never in need of a friend",
        "meaning": "True friends support each other",
        "category": "friendship",
    },
    {
        "id": 3,
        "textDari": "هر که بامش بیش، برفش بیشتر",
        "textPashto": "چا چې د ګرځې لوړوالی زیات وي، د برف کچه یې هم زیاتوي",
        "translationEn": "The higher the roof, the more snow it collects",
        "meaning": "Greater positions come with greater responsibilities",
        "category": "life",
    },
    {
        "id": 4,
        "textDari": "سگ زرد برادر شغال است",
        "textPashto": "ژېړ سپی د ګېډۍ ورور دی",
        "translationEn": "A yellow dog is a brother to the jackal",
        "meaning": "People of similar character stick together",
        "category": "wisdom",
    },
    {
        "id": 5,
        "textDari": "آب که از سر گذشت، چه یک وجب چه صد وجب",
        "textPashto": "چې اوبه له سر تیریږي، نو یو څوکه یا سل څوکه څه توپیر لري",
        "translationEn": "When water has passed over your head, what difference does it make if it's one span or a hundred?",
        "meaning": "Once you're in deep trouble, the extent doesn't matter",
        "category": "life",
    },
]


def seed_records() -> list[ProverbRecord]:
    return [ProverbRecord.from_dict(item) for item in SEED_PROVERBS]
