from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

import structlog

from .config import RenderSettings
from .errors import FormatError, ResourceError, TerrainViewError
from .pipeline import HeightmapPipeline, RenderResult

logger = structlog.get_logger(__name__)


@dataclass
class BatchReport:
    succeeded: List[RenderResult] = field(default_factory=list)
    failures: List[Tuple[str, FormatError]] = field(default_factory=list)
    aborted: Optional[TerrainViewError] = None

    @property
    def ok(self) -> bool:
        return not self.failures and self.aborted is None


def find_inputs(directory: str, extension: str) -> List[str]:
    """List regular files in ``directory`` ending with ``extension`` (any case)."""
    suffix = extension.lower()
    found = []
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if name.lower().endswith(suffix) and os.path.isfile(path):
            found.append(path)
    return found


def archive(path: str, processed_dir: str) -> str:
    """Move a processed input into ``processed_dir`` and return its new path."""
    target = os.path.join(processed_dir, os.path.basename(path))
    try:
        os.makedirs(processed_dir, exist_ok=True)
        os.replace(path, target)
    except OSError as exc:
        raise ResourceError("Cannot move processed input", path) from exc
    return target


def run_batch(settings: RenderSettings, pipeline: Optional[HeightmapPipeline] = None) -> BatchReport:
    """Convert every matching file in the input directory, one after another.

    Files failing validation are reported and left in place. A resource
    error, or any validation failure under ``fail_fast``, stops the loop;
    the report still lists every file converted before that point.
    """
    pipeline = pipeline or HeightmapPipeline(settings)
    try:
        inputs = find_inputs(settings.input_dir, settings.extension)
    except OSError as exc:
        raise ResourceError("Cannot scan input directory", settings.input_dir) from exc
    report = BatchReport()
    logger.info("Batch started", directory=settings.input_dir, files=len(inputs))
    for path in inputs:
        try:
            result = pipeline.process_file(path)
            archived = archive(path, settings.resolved_processed_dir)
        except FormatError as exc:
            logger.error("Input rejected", source=path, error=exc.message, field=exc.field, value=exc.raw)
            report.failures.append((path, exc))
            if settings.fail_fast:
                report.aborted = exc
                break
            continue
        except ResourceError as exc:
            logger.error("Batch aborted", source=path, error=str(exc))
            report.aborted = exc
            break
        logger.info("Input archived", source=path, archived=archived)
        report.succeeded.append(replace(result, archived_path=archived))
    logger.info("Batch finished", succeeded=len(report.succeeded), failed=len(report.failures))
    return report
