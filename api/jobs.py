"""In-memory translation jobs.

There is no database: each job lives in the process-wide ``job_registry`` for
as long as the process runs. At most one job runs at a time; a trigger that
arrives while a job is running is rejected with ``JobAlreadyRunning``.
"""
import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Optional

from django.conf import settings
from django.utils import timezone as django_timezone

from api.translation import ensure_folders, process_input_files

# No jumping back in status; finished states are final
TRANSITIONS = {
    "pending": ("running", "failed"),
    "running": ("succeeded", "failed"),
    "succeeded": (),
    "failed": (),
}
FINISHED = ("succeeded", "failed")

# Finished jobs older than this are dropped from the registry
JOB_RETENTION = timedelta(days=1)


class JobAlreadyRunning(Exception):
    def __init__(self, job: "TranslationJob"):
        super().__init__(f"Translation job {job.id} is already running")
        self.job = job


@dataclass
class TranslationJob:
    trigger: str = "http"  # startup|http
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    status: str = "pending"
    files: list[str] = field(default_factory=list)
    current_file: Optional[str] = None
    processed_files: list[str] = field(default_factory=list)
    failed_files: list[str] = field(default_factory=list)
    lines_done: int = 0
    lines_total: int = 0
    error_message: str = ""
    created_at: datetime = field(default_factory=django_timezone.now)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    done: threading.Event = field(default_factory=threading.Event, repr=False, compare=False)

    @property
    def is_finished(self) -> bool:
        return self.status in FINISHED

    def advance(self, new_status: str):
        if new_status not in TRANSITIONS[self.status]:
            raise ValueError(f"Cannot move job {self.id} from {self.status} to {new_status}")
        self.status = new_status
        if new_status == "running" and self.started_at is None:
            self.started_at = django_timezone.now()
        if new_status in FINISHED:
            self.current_file = None
            self.finished_at = django_timezone.now()
            self.done.set()

    def set_files(self, files: list[str]):
        self.files = list(files)

    def start_file(self, filename: str):
        self.current_file = filename
        self.lines_done = 0
        self.lines_total = 0

    def finish_file(self, filename: str, error: Optional[str] = None):
        if error is None:
            self.processed_files.append(filename)
        else:
            self.failed_files.append(filename)
        self.current_file = None

    def record_progress(self, done: int, total: int):
        self.lines_done = done
        self.lines_total = total

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.done.wait(timeout)


def run_translation_job(job: TranslationJob):
    result = process_input_files(job=job)
    if not result.ok:
        errors = [f"{name}: {error}" for name, error in result.failed_files.items()]
        if result.error:
            errors.insert(0, result.error)
        raise RuntimeError("; ".join(errors))


class JobRegistry:
    def __init__(self, runner: Optional[Callable[[TranslationJob], None]] = None):
        self.runner = runner or run_translation_job
        self._jobs: dict[str, TranslationJob] = {}
        self._active: Optional[TranslationJob] = None
        self._lock = threading.Lock()

    def start(self, trigger: str = "http") -> TranslationJob:
        """
        Create a job and run it on a background thread without waiting for it.
        Raises JobAlreadyRunning if another job has not finished yet. Finished jobs older than
        JOB_RETENTION are dropped on the way.
        """
        with self._lock:
            if self._active is not None and not self._active.is_finished:
                raise JobAlreadyRunning(self._active)
            self._prune()
            job = TranslationJob(trigger=trigger)
            self._jobs[str(job.id)] = job
            self._active = job

        logging.info(f"Starting translation job {job.id} ({trigger})")
        thread = threading.Thread(target=self._run, args=(job,), name=f"translation-{job.id}", daemon=True)
        try:
            thread.start()
        except Exception as e:
            job.error_message = str(e)
            job.advance("failed")
            logging.error(f"Could not start translation job {job.id}: {e}")
            raise
        return job

    def _prune(self):
        day_start = django_timezone.now() - JOB_RETENTION
        for job_id, job in list(self._jobs.items()):
            if job.is_finished and job.created_at < day_start:
                del self._jobs[job_id]

    def _run(self, job: TranslationJob):
        job.advance("running")
        try:
            self.runner(job)
        except Exception as e:
            job.error_message = str(e)
            job.advance("failed")
            logging.error(f"Translation job {job.id} failed: {e}")
        else:
            job.advance("succeeded")
            logging.info(f"Translation job {job.id} completed")

    def get(self, job_id) -> Optional[TranslationJob]:
        return self._jobs.get(str(job_id))

    def active(self) -> Optional[TranslationJob]:
        with self._lock:
            if self._active is not None and not self._active.is_finished:
                return self._active
            return None

    def latest(self) -> Optional[TranslationJob]:
        jobs = self.all()
        return jobs[0] if jobs else None

    def all(self) -> list[TranslationJob]:
        with self._lock:
            jobs = list(self._jobs.values())
        return list(reversed(jobs))


job_registry = JobRegistry()


def process_on_startup():
    ensure_folders()
    logging.info(f"Input folder: {settings.TRANSLATOR_INPUT_FOLDER}")
    logging.info(f"Output folder: {settings.TRANSLATOR_OUTPUT_FOLDER}")
    logging.info(f"Prompt file: {settings.TRANSLATOR_PROMPT_FILE}")
    if not settings.AUTO_PROCESS_ON_STARTUP:
        return None
    logging.info("Starting translation process automatically...")
    try:
        return job_registry.start(trigger="startup")
    except JobAlreadyRunning as e:
        logging.warning(str(e))
        return e.job
