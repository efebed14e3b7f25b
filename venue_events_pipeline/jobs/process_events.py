"""
Job principal de normalisation des événements 25Live.

Lit les enregistrements bruts déposés par le collecteur, produit les
événements finalisés et les tâches de vérification d'enregistrement, puis
les écrit en JSON pour les collaborateurs de stockage et de planification.

Usage :
    python -m venue_events_pipeline.jobs.process_events --input raw.json --output out.json
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config.settings import Settings
from ..consolidators.room_merger import merge_adjacent_room_events
from ..consolidators.session_consolidator import consolidate_kec_sessions
from ..models.event import Event, RecordingTask
from ..normalizers.events_normalizer import EventsNormalizer
from ..tasks.recording_tasks import derive_tasks_for_events
from ..utils.monitoring import JobStatus, PipelineMonitor
from ..utils.validators import is_record_sequence

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class PipelineResult:
    """Résultat d'une exécution : événements, tâches et rapport."""
    events: List[Event] = field(default_factory=list)
    tasks: List[RecordingTask] = field(default_factory=list)
    report: Dict[str, Any] = field(default_factory=dict)
    
    def to_records(self, now: Optional[datetime] = None) -> Dict[str, List[Dict[str, Any]]]:
        """
        Sérialise le résultat.
        
        Raises:
            MissingIdentityError: Si un événement n'a pas son identité complète
        """
        now = now or datetime.now()
        return {
            "events": [e.to_record(updated_at=now) for e in self.events],
            "tasks": [t.to_record() for t in self.tasks],
        }


def transform_raw_events(
    raw_data: Any,
    settings: Optional[Settings] = None,
    monitor: Optional[PipelineMonitor] = None,
) -> List[Event]:
    """
    Transforme les enregistrements bruts en événements finalisés.
    
    Enchaîne filtre + assemblage, fusion des salles adjacentes puis
    consolidation des sessions KEC. Aucun état n'est conservé entre deux
    appels : la même entrée donne toujours les mêmes événements.
    
    Args:
        raw_data: Séquence de dicts du collecteur (None ou non-séquence = aucun événement)
        settings: Configuration (si None, charge depuis env)
        monitor: Monitor recevant les volumes de chaque étape
    
    Returns:
        Événements finalisés
    """
    settings = settings or Settings.from_env()
    raw_count = len(raw_data) if is_record_sequence(raw_data) else 0
    
    assembled = EventsNormalizer(settings).normalize_all(raw_data)
    merged = merge_adjacent_room_events(assembled)
    finalized = consolidate_kec_sessions(merged, kec_tag=settings.kec_category_tag)
    
    if monitor:
        monitor.record_stage("assemble", raw_count, len(assembled))
        monitor.record_stage("merge_adjacent_rooms", len(assembled), len(merged))
        monitor.record_stage("consolidate_sessions", len(merged), len(finalized))
    
    return finalized


def process_raw_events(
    raw_data: Any,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> PipelineResult:
    """
    Exécute le pipeline complet : événements puis tâches d'enregistrement.
    
    Args:
        raw_data: Séquence de dicts du collecteur
        settings: Configuration (si None, charge depuis env)
        now: Horodatage des tâches créées
    
    Returns:
        PipelineResult avec rapport d'exécution
    
    Raises:
        ValueError: Si un enregistrement a des horaires invalides
    """
    settings = settings or Settings.from_env()
    monitor = PipelineMonitor("process_events")
    monitor.log_job_start({'records': len(raw_data) if is_record_sequence(raw_data) else 0})
    
    try:
        events = transform_raw_events(raw_data, settings=settings, monitor=monitor)
        tasks = derive_tasks_for_events(
            events,
            prefix=settings.recording_resource_prefix,
            now=now,
        )
        monitor.record_stage("derive_tasks", len(events), len(tasks))
    except Exception as e:
        monitor.record_error(e, source="process_events")
        monitor.log_job_end(JobStatus.FAILED)
        raise
    
    report = monitor.log_job_end(JobStatus.SUCCESS)
    report['total_events'] = len(events)
    report['total_tasks'] = len(tasks)
    return PipelineResult(events=events, tasks=tasks, report=report)


def configure_logging(settings: Settings) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_to_file:
        log_path = Path(settings.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def load_raw_events(path: Path) -> Any:
    """Charge le dépôt JSON du collecteur (liste d'enregistrements)."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée CLI."""
    parser = argparse.ArgumentParser(
        description="Normalize raw 25Live room bookings into events and recording tasks"
    )
    
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON file with raw records from the collector"
    )
    
    parser.add_argument(
        "--output",
        type=Path,
        help="Write events and tasks as JSON to this file (default: stdout)"
    )
    
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output report as JSON"
    )
    
    args = parser.parse_args(argv)
    
    settings = Settings.from_env()
    configure_logging(settings)
    
    try:
        raw_data = load_raw_events(args.input)
        result = process_raw_events(raw_data, settings=settings)
        payload = json.dumps(result.to_records(), indent=2, default=str)
        
        if args.output:
            args.output.write_text(payload, encoding="utf-8")
        else:
            print(payload)
        
        if args.json:
            print(json.dumps(result.report, indent=2, default=str), file=sys.stderr)
        else:
            report = result.report
            print("\n" + "=" * 60, file=sys.stderr)
            print("PROCESSING REPORT", file=sys.stderr)
            print("=" * 60, file=sys.stderr)
            print(f"Status: {report['status']}", file=sys.stderr)
            print(f"Duration: {report['duration_seconds']:.2f}s", file=sys.stderr)
            for stage, counts in report['stages'].items():
                print(f"  {stage}: {counts['records_in']} -> {counts['records_out']}", file=sys.stderr)
            print(f"Events: {report['total_events']}", file=sys.stderr)
            print(f"Tasks: {report['total_tasks']}", file=sys.stderr)
        
        return 0
    
    except KeyboardInterrupt:
        logger.warning("Processing interrupted by user")
        print("\n⚠️  Processing interrupted", file=sys.stderr)
        return 130
    except (OSError, ValueError) as e:
        logger.error(f"Processing failed: {e}", exc_info=True)
        print(f"\n❌ Processing failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
