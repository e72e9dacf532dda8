"""Konfigurationsmanager: Laden, Speichern und Validieren der Kalender-Config.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from config.defaults import default_calendar_config
from config.schema import CalendarConfig

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# Kalender-Layout: Konfiguration
# Version: 1.0
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "day": (
        "Tagesansicht",
        "grid_origin_minutes: Uhrzeit bei Pixel 0 (480 = 08:00, auch \"08:00\" erlaubt).",
    ),
    "week": (
        "Wochenansicht",
        None,
    ),
    "range": (
        "Zeitraum-Ansicht",
        "Schmale Spalten: kleine Mindesthöhe.",
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "calendar_config.yaml"

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else self.DEFAULT_CONFIG

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.path.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> CalendarConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = Path(path) if path is not None else self.path
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus."
            )
        with open(target, "r", encoding="utf-8") as f:
            try:
                raw = yaml.load(f)
            except YAMLError as e:
                raise ValueError(
                    f"Konfigurationsdatei ungültig: {target}\n"
                    f"YAML-Fehler: {e}"
                ) from e
        try:
            config = CalendarConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e
        logger.info(f"Konfiguration geladen: {target}")
        return config

    def load_or_default(self) -> CalendarConfig:
        """Lädt die Config, ohne Datei die Default-Konfiguration."""
        if self.first_run_check():
            logger.info(f"Keine Konfiguration unter {self.path}, verwende Defaults")
            return default_calendar_config()
        return self.load()

    # ─── Speichern ───

    def save(self, config: CalendarConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit deutschen Kommentaren."""
        target = Path(path) if path is not None else self.path
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        logger.info(f"Konfiguration gespeichert: {target}")
        return target

    def _build_commented_yaml(self, config: CalendarConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap()
        for key, value in raw.items():
            cm[key] = CommentedMap(value) if isinstance(value, dict) else value

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        return cm
