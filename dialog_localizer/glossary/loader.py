import json
import secrets
import string
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import ClassVar

from dialog_localizer.glossary.models import DEFAULT_CATEGORY, GlossaryTerm, RawTerm
from dialog_localizer.logging.logger import Log

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 5


def generate_term_id() -> str:
    """Random 5-char base-36 id, valid inside the placeholder grammar."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class GlossaryLoader:
    """Reads categorized term lists from ``<root>/<subdir>/names_only.json``."""

    TERMS_FILENAME: ClassVar[str] = "names_only.json"

    CATEGORY_MAP: ClassVar[dict[str, str]] = {
        "creatures": "Creature",
        "enchanting": "Enchanting",
        "other": "Term",
        "perks": "Perk",
        "races": "Race",
        "skills": "Skill",
        "skyrim_characters": "Name",
        "skyrim_factions": "Faction",
        "skyrim_items": "Item",
        "skyrim_locations": "Location",
        "skyrim_quests": "Quest",
        "spells": "Spell",
    }

    def __init__(self, root: Path) -> None:
        self._root = root

    def load(self) -> list[RawTerm]:
        """Return every term from every category directory, in directory order.

        Missing root yields an empty list. Files that cannot be read or
        parsed are logged and skipped.
        """
        if not self._root.is_dir():
            Log.warning(f"Glossary directory {self._root} not found, no terms loaded")
            return []

        terms: list[RawTerm] = []
        for subdir in sorted(p for p in self._root.iterdir() if p.is_dir()):
            path = subdir / self.TERMS_FILENAME
            if not path.is_file():
                continue
            category = self.CATEGORY_MAP.get(subdir.name, DEFAULT_CATEGORY)
            items = self._read_items(path)
            terms.extend(RawTerm(term=item, category=category) for item in items)
            Log.info(f"Loaded {len(items)} terms from {subdir.name}/{path.name} as {category}")

        Log.info(f"Total raw terms loaded: {len(terms)}")
        return terms

    @staticmethod
    def _read_items(path: Path) -> list[str]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            Log.error(f"Error reading {path}: {exc}")
            return []
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            Log.warning(f"{path} has no 'items' list, skipped")
            return []
        return [item for item in items if isinstance(item, str) and item]


def assign_ids(
    raw_terms: Iterable[RawTerm],
    id_factory: Callable[[], str] = generate_term_id,
) -> list[GlossaryTerm]:
    """Deduplicate terms case-insensitively (first wins) and give each a unique id."""
    seen_terms: set[str] = set()
    used_ids: set[str] = set()
    result: list[GlossaryTerm] = []
    for raw in raw_terms:
        key = raw.term.lower()
        if key in seen_terms:
            continue
        seen_terms.add(key)
        term_id = id_factory()
        while term_id in used_ids:
            term_id = id_factory()
        used_ids.add(term_id)
        result.append(GlossaryTerm(id=term_id, term=raw.term, category=raw.category))
    return result
