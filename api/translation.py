import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from django.conf import settings

from api.openai_client import OpenAICompletionClient
from api.text import split_lines


@dataclass
class BatchResult:
    files: list[str] = field(default_factory=list)
    processed_files: list[str] = field(default_factory=list)
    failed_files: dict[str, str] = field(default_factory=dict)
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.failed_files and not self.error


def input_folder() -> Path:
    return Path(settings.TRANSLATOR_INPUT_FOLDER)


def output_folder() -> Path:
    return Path(settings.TRANSLATOR_OUTPUT_FOLDER)


def ensure_folders():
    for folder in (input_folder(), output_folder()):
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logging.error("Error creating folder %s: %s", folder, e)


def list_text_files(folder: str | Path) -> list[str]:
    """Names in ``folder`` ending in the text extension, sorted. Raises OSError if the folder can't be listed."""
    extension = settings.TRANSLATOR_FILE_EXTENSION
    return sorted(name for name in os.listdir(folder) if name.endswith(extension))


def export_name(filename: str) -> str:
    return f"{settings.TRANSLATOR_OUTPUT_PREFIX}{filename}"


def read_prompt(path: str | Path | None = None) -> str:
    path = Path(path or settings.TRANSLATOR_PROMPT_FILE)
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logging.warning("Error reading prompt file %s: %s", path, e)
        return settings.TRANSLATOR_DEFAULT_PROMPT


def translate_lines(lines: list[str], prompt: str, client, on_progress: Optional[Callable[[int, int], None]] = None) -> list[str]:
    """
    Translate ``lines`` one at a time, in order. The result always has the same length as ``lines``:
    the client falls back to the original line when a call fails.
    """
    total = len(lines)
    translated = []
    for index, line in enumerate(lines, start=1):
        logging.info(f"Translating line {index}/{total}")
        translated.append(client.translate(prompt, line))
        if on_progress:
            on_progress(index, total)
    return translated


def translate_file(filename: str, prompt: str, client, on_progress=None) -> Path:
    source = input_folder() / filename
    content = source.read_text(encoding="utf-8")

    lines = split_lines(content)
    logging.info(f"Processing {len(lines)} lines")
    translated = translate_lines(lines, prompt, client, on_progress=on_progress)

    target_dir = output_folder()
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / export_name(filename)
    target.write_text("\n".join(translated), encoding="utf-8")
    logging.info(f"Translation completed: {target}")
    return target


def process_input_files(job=None, client=None) -> BatchResult:
    """
    Translate every text file of the input folder into the output folder.

    A file that can't be read or written is recorded in ``failed_files`` and the remaining files
    are still processed. Errors are never raised to the caller; they are logged and reported in
    the returned ``BatchResult``.
    """
    result = BatchResult()
    try:
        result.files = list_text_files(input_folder())
    except OSError as e:
        logging.error("Error processing files: %s", e)
        result.error = str(e)
        return result

    if job is not None:
        job.set_files(result.files)

    if not result.files:
        logging.info(f"No {settings.TRANSLATOR_FILE_EXTENSION} files found in input folder")
        return result

    prompt = read_prompt()
    client = client or OpenAICompletionClient()

    for filename in result.files:
        logging.info(f"Processing file: {filename}")
        on_progress = None
        if job is not None:
            job.start_file(filename)
            on_progress = job.record_progress
        try:
            translate_file(filename, prompt, client, on_progress=on_progress)
        except (OSError, UnicodeDecodeError) as e:
            logging.error("Error processing file %s: %s", filename, e)
            result.failed_files[filename] = str(e)
            if job is not None:
                job.finish_file(filename, error=str(e))
            continue
        result.processed_files.append(filename)
        if job is not None:
            job.finish_file(filename)
    return result
