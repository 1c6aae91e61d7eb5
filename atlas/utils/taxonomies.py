"""
Keyword taxonomy loading.

The vocabularies (tech skills, buzzwords, action verbs, stop words, ...) are
static reference data kept in YAML. They are loaded once at import time and
frozen into tuples, so every scan runs against the same immutable lists.

Usage:
    from atlas.utils.taxonomies import TAXONOMIES

    for skill in TAXONOMIES.tech_skills:
        ...
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from atlas.exceptions import InvalidStructureError

load_dotenv()

DEFAULT_TAXONOMIES_PATH = Path(__file__).resolve().parent.parent / "config" / "taxonomies.yaml"
TAXONOMIES_PATH = Path(os.getenv("ATLAS_TAXONOMIES_PATH", str(DEFAULT_TAXONOMIES_PATH)))

REQUIRED_KEYS = (
    "tech_skills",
    "buzzwords",
    "action_verbs",
    "fallback_skills",
    "job_keywords",
    "project_technologies",
    "stop_words",
)


@dataclass(frozen=True)
class Taxonomies:
    """Immutable keyword vocabularies. Every entry is lower-case."""

    tech_skills: tuple
    buzzwords: tuple
    action_verbs: tuple
    fallback_skills: tuple
    job_keywords: tuple
    project_technologies: tuple
    stop_words: frozenset


def _as_vocabulary(values: list) -> tuple:
    """Lower-case, strip and de-duplicate a vocabulary, keeping list order."""
    cleaned = (str(value).strip().lower() for value in values)
    return tuple(dict.fromkeys(value for value in cleaned if value))


def load_taxonomies(config_path: Optional[Path] = None) -> Taxonomies:
    """
    Load taxonomies.yaml and freeze it into a Taxonomies instance.

    Args:
        config_path: Optional path to a vocabulary file (defaults to
            ATLAS_TAXONOMIES_PATH, or the packaged taxonomies.yaml)

    Returns:
        Taxonomies with every vocabulary as a tuple (stop words as a frozenset)

    Raises:
        InvalidStructureError: If a required vocabulary is missing or not a list
    """
    if config_path is None:
        config_path = TAXONOMIES_PATH

    raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    if not isinstance(raw, dict):
        raise InvalidStructureError(f"Taxonomy file must be a mapping: {config_path}")

    missing = [key for key in REQUIRED_KEYS if key not in raw]
    if missing:
        raise InvalidStructureError(
            f"Taxonomy file {config_path} is missing vocabularies: {', '.join(missing)}"
        )

    vocabularies = {}
    for key in REQUIRED_KEYS:
        values = raw[key]
        if not isinstance(values, list):
            raise InvalidStructureError(f"Vocabulary '{key}' must be a list in {config_path}")
        vocabularies[key] = _as_vocabulary(values)

    vocabularies["stop_words"] = frozenset(vocabularies["stop_words"])

    return Taxonomies(**vocabularies)


TAXONOMIES = load_taxonomies()
