"""
Configuration générale du pipeline.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv
from pathlib import Path

from .venue_config import DEFAULT_KEC_CATEGORY_TAG, DEFAULT_RECORDING_RESOURCE_PREFIX

# Charger .env depuis la racine du projet
project_root = Path(__file__).parent.parent.parent
load_dotenv(dotenv_path=project_root / ".env")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Settings:
    """Configuration globale du pipeline."""
    
    # Catégorie des programmes exécutifs (sessions consolidées par salle/jour)
    kec_category_tag: str = DEFAULT_KEC_CATEGORY_TAG
    
    # Préfixe des ressources d'enregistrement vidéo
    recording_resource_prefix: str = DEFAULT_RECORDING_RESOURCE_PREFIX
    
    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_file_path: str = "logs/venue_events_pipeline.log"
    
    @classmethod
    def from_env(cls) -> "Settings":
        """Crée une instance Settings depuis les variables d'environnement."""
        return cls(
            kec_category_tag=os.getenv("KEC_CATEGORY_TAG", DEFAULT_KEC_CATEGORY_TAG),
            recording_resource_prefix=os.getenv(
                "RECORDING_RESOURCE_PREFIX", DEFAULT_RECORDING_RESOURCE_PREFIX
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_to_file=_env_flag("LOG_TO_FILE"),
            log_file_path=os.getenv("LOG_FILE_PATH", "logs/venue_events_pipeline.log"),
        )
