"""Localized output strings."""

from __future__ import annotations

from typing import Dict

from models.records import SignalKind

DEFAULT_LANGUAGE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "registered": "Data registered: {kind} - {value} {unit}",
        "exists": "Data exists for signal: {kind}",
        "none": "No data for signal: {kind}",
        "prompt": "Enter value for {kind}: ",
        "validation_error": "Validation error: {message}",
        "error": "Error: {message}",
        "reading_ok": "{kind} - {value} {unit} is within range",
        "coordinates_ok": "Coordinates ({lat}, {lon}) are valid",
    },
    "uk": {
        "registered": "Дані зареєстровані: {kind} - {value} {unit}",
        "exists": "Існують дані для сигналу: {kind}",
        "none": "Немає даних для сигналу: {kind}",
        "prompt": "Введіть значення для {kind}: ",
        "validation_error": "Помилка валідації: {message}",
        "error": "Помилка: {message}",
        "reading_ok": "{kind} - {value} {unit} у допустимих межах",
        "coordinates_ok": "Координати ({lat}, {lon}) коректні",
    },
}

UNITS: Dict[str, Dict[SignalKind, str]] = {
    "en": {
        SignalKind.temperature: "°C",
        SignalKind.humidity: "%",
        SignalKind.light: "lux",
    },
    "uk": {
        SignalKind.temperature: "°C",
        SignalKind.humidity: "%",
        SignalKind.light: "лк",
    },
}

SUPPORTED_LANGUAGES = tuple(MESSAGES)


def _catalog(language: str) -> str:
    return language if language in MESSAGES else DEFAULT_LANGUAGE


def message(key: str, language: str = DEFAULT_LANGUAGE, **params: object) -> str:
    return MESSAGES[_catalog(language)][key].format(**params)


def unit_for(kind: SignalKind, language: str = DEFAULT_LANGUAGE) -> str:
    return UNITS[_catalog(language)].get(kind, "")
