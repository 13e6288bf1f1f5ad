"""English/Thai UI text for pages marked up with ``data-i18n`` attributes.

An element such as ``<h2 data-i18n="contact.title">`` receives the string
found under that dotted key for the active language. Keys missing in the
active language fall back to English, and keys missing everywhere are shown
as the key itself.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, MutableMapping
from pathlib import Path

from bs4 import BeautifulSoup

from .translations import TRANSLATIONS

SUPPORTED_LANGUAGES = ("en", "th")
DEFAULT_LANGUAGE = "en"
INITIAL_LANGUAGE = "th"
ATTRIBUTE = "data-i18n"
TOGGLE_LABEL_ID = "langText"
PLACEHOLDER_INPUT_TYPES = {"text", "email", "search", "tel", "url", "password"}


def flatten(nested: Mapping, prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in nested.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten(value, path))
        elif isinstance(value, str):
            flat[path] = value
    return flat


def compile_translations(nested: Mapping) -> dict[str, dict[str, str]]:
    return {language: flatten(sections) for language, sections in nested.items()}


class Translator:
    def __init__(self, translations: Mapping = TRANSLATIONS, default_language: str = DEFAULT_LANGUAGE) -> None:
        self.table = compile_translations(translations)
        self.default_language = default_language

    def translate(self, key: str, language: str) -> str:
        value = self.table.get(language, {}).get(key)
        if not value:
            value = self.table.get(self.default_language, {}).get(key)
        return value or key


class JsonFileStorage(MutableMapping):
    """String key/value pairs kept in a JSON file, written through on every change."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._data = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2, ensure_ascii=False), encoding="utf-8")

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._save()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class LanguagePreference:
    def __init__(self, storage: MutableMapping, key: str = "language", initial: str = INITIAL_LANGUAGE) -> None:
        self.storage = storage
        self.key = key
        self.initial = initial

    @property
    def current(self) -> str:
        language = self.storage.get(self.key)
        return language if language in SUPPORTED_LANGUAGES else self.initial

    def set(self, language: str) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        self.storage[self.key] = language

    def toggle(self) -> str:
        language = "th" if self.current == "en" else "en"
        self.set(language)
        return language


def apply_language(markup: str, translator: Translator, language: str) -> str:
    soup = BeautifulSoup(markup, "html.parser")
    for element in soup.select(f"[{ATTRIBUTE}]"):
        translation = translator.translate(element[ATTRIBUTE], language)
        if element.name in ("input", "textarea"):
            if element.name == "textarea" or element.get("type", "text").lower() in PLACEHOLDER_INPUT_TYPES:
                element["placeholder"] = translation
        elif element.name == "button":
            # keeps icon markup in translated button labels
            element.clear()
            for node in list(BeautifulSoup(translation, "html.parser").contents):
                element.append(node)
        else:
            element.string = translation
    label = soup.find(id=TOGGLE_LABEL_ID)
    if label is not None:
        label.string = "TH" if language == "en" else "EN"
    return str(soup)


class LanguageSwitcher:
    def __init__(self, translator: Translator, preference: LanguagePreference) -> None:
        self.translator = translator
        self.preference = preference

    def apply(self, markup: str) -> str:
        language = self.preference.current
        self.preference.set(language)
        return apply_language(markup, self.translator, language)

    def toggle(self, markup: str) -> str:
        self.preference.toggle()
        return self.apply(markup)
