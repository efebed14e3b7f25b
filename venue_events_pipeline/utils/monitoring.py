"""
Suivi d'exécution du pipeline.

Enregistre le début et la fin des jobs ainsi que les volumes traités par
chaque étape, et les journalise.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Any

logger = logging.getLogger(__name__)


class JobStatus(Enum):
    """Statuts d'exécution des jobs."""
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class StageStats:
    """Volumes d'entrée / sortie d'une étape."""
    stage: str
    records_in: int
    records_out: int
    
    @property
    def records_removed(self) -> int:
        return self.records_in - self.records_out


class PipelineMonitor:
    """
    Gestionnaire de monitoring pour un job du pipeline.
    
    Un monitor correspond à une exécution : il n'est pas partagé entre jobs.
    """
    
    def __init__(self, job_name: str):
        self.job_name = job_name
        self.status = JobStatus.RUNNING
        self.start_time: Optional[datetime] = None
        self.end_time: Optional[datetime] = None
        self.stages: List[StageStats] = []
        self.errors: List[Dict[str, Any]] = []
    
    def log_job_start(self, params: Optional[Dict[str, Any]] = None) -> None:
        self.start_time = datetime.now()
        self.status = JobStatus.RUNNING
        logger.info(f"[Monitor] Job started: {self.job_name} (params: {params or {}})")
    
    def record_stage(self, stage: str, records_in: int, records_out: int) -> StageStats:
        """
        Enregistre les volumes d'une étape.
        
        Args:
            stage: Nom de l'étape ('filter', 'assemble', ...)
            records_in: Nombre d'enregistrements reçus
            records_out: Nombre d'enregistrements produits
        """
        stats = StageStats(stage=stage, records_in=records_in, records_out=records_out)
        self.stages.append(stats)
        logger.info(f"[Monitor] {self.job_name}.{stage}: {records_in} -> {records_out}")
        return stats
    
    def record_error(self, error: Exception, source: str) -> None:
        self.errors.append({
            'error': str(error),
            'source': source,
            'timestamp': datetime.now().isoformat(),
        })
    
    def log_job_end(self, status: JobStatus) -> Dict[str, Any]:
        """
        Clôt le job et retourne son rapport.
        
        Returns:
            Rapport {job_name, status, duration_seconds, stages, errors}
        """
        self.end_time = datetime.now()
        self.status = status
        start_time = self.start_time or self.end_time
        duration = (self.end_time - start_time).total_seconds()
        
        log = logger.error if status == JobStatus.FAILED else logger.info
        log(
            f"[Monitor] Job ended: {self.job_name} (status: {status.value}, "
            f"duration: {duration:.2f}s, errors: {len(self.errors)})"
        )
        
        return {
            'job_name': self.job_name,
            'status': status.value,
            'start_time': start_time.isoformat(),
            'end_time': self.end_time.isoformat(),
            'duration_seconds': duration,
            'stages': {
                s.stage: {'records_in': s.records_in, 'records_out': s.records_out}
                for s in self.stages
            },
            'errors': self.errors,
        }
