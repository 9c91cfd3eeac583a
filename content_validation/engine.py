from __future__ import annotations

import sys
import time
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import ValidationError

from app_logging.run_logger import ValidationRunLogger
from content_validation.budget import check_total_budget
from content_validation.errors import ContentRejectedError
from content_validation.findings import Findings
from content_validation.limits import DEFAULT_LIMITS, ValidationLimits
from content_validation.manifest import collect_manifest_findings
from content_validation.performance import estimate_performance
from content_validation.scenes import check_scene
from content_validation.sizing import round_half_up, size_of
from content_validation.structure import check_structure, get_scenes
from schemas.content import ContentDocument, SceneKind, parse_scene, resolve_scene_kind
from schemas.report import BatchReport, PerformanceSummary, ValidationReport


Clock = Callable[[], float]
Collector = Callable[[Any, Findings], int]

CONTENT_TYPES = ("document", "scene", "dialogue", "quiz", "manifest")


def _describe(payload: Any) -> Dict[str, Any]:
    scenes = get_scenes(payload)
    return {
        "type": type(payload).__name__,
        "scene_count": len(scenes) if scenes is not None else None,
    }


def _is_empty(content: Any) -> bool:
    return content is None or (isinstance(content, (dict, list, str)) and not content)


class ContentValidator:
    """
    Validation orchestrator for course content submissions.

    Every public validate_* method is total: structural, budget and semantic
    problems become report errors or warnings, and internal faults (cyclic
    input, unexpected exceptions) become a single "Validation error: ..."
    entry with lighthouseImpact -10. Nothing is cached between calls.

    Elapsed time is measured with the injected clock (seconds) and compared
    against limits.validation_timeout_ms; overruns only add a warning.
    """

    def __init__(
        self,
        *,
        limits: Optional[ValidationLimits] = None,
        clock: Optional[Clock] = None,
        run_logger: Optional[ValidationRunLogger] = None,
    ) -> None:
        self.limits = limits or DEFAULT_LIMITS
        self._clock = clock or time.perf_counter
        self._run_logger = run_logger

    # ---- public API ----

    def validate(self, document: Any) -> ValidationReport:
        return self._run("document", document, self._collect_document)

    def validate_scene(self, scene: Any, scene_type: Union[SceneKind, str, None] = None) -> ValidationReport:
        kind = resolve_scene_kind(scene_type) if isinstance(scene_type, str) else scene_type

        def collect(payload: Any, out: Findings) -> int:
            total = size_of(payload)
            out.extend(check_scene(payload, index=0, limits=self.limits, kind=kind))
            return total

        return self._run("scene", scene, collect)

    def validate_manifest(self, manifest: Any) -> ValidationReport:
        return self._run(
            "manifest",
            manifest,
            lambda payload, out: collect_manifest_findings(payload, out, self.limits),
        )

    def validate_submission(self, content: Any, content_type: str = "document") -> ValidationReport:
        if content_type not in CONTENT_TYPES:
            raise ValueError(f"Unknown content_type: {content_type}. Expected one of {CONTENT_TYPES}")

        if _is_empty(content):
            return ValidationReport.from_findings(
                errors=["No content provided for validation"],
                warnings=[],
                performance=PerformanceSummary(),
            )

        if content_type == "document":
            return self.validate(content)
        if content_type == "manifest":
            return self.validate_manifest(content)
        if content_type == "dialogue":
            return self.validate_scene(content, SceneKind.dialogue)
        if content_type == "quiz":
            return self.validate_scene(content, SceneKind.quiz)
        return self.validate_scene(content)

    def validate_batch(self, documents: Any) -> BatchReport:
        started = self._clock()
        results: List[ValidationReport] = []
        if isinstance(documents, list):
            results = [self.validate(doc) for doc in documents]
        elapsed_ms = round_half_up((self._clock() - started) * 1000)
        return BatchReport(results=results, total_processing_time=elapsed_ms)

    def accept(self, document: Any) -> ContentDocument:
        """
        Validate and return the typed view of the document.
        Raises ContentRejectedError carrying the report when it cannot be published.
        """
        report = self.validate(document)
        if not report.is_valid:
            raise ContentRejectedError(report)

        scenes = []
        type_errors: List[str] = []
        for index, raw in enumerate(get_scenes(document) or []):
            try:
                scenes.append(parse_scene(raw))
            except ValidationError as e:
                for err in e.errors():
                    loc = ".".join(str(p) for p in err["loc"])
                    type_errors.append(f"Scene {index} invalid value at {loc}: {err['msg']}")

        if type_errors:
            raise ContentRejectedError(
                ValidationReport.from_findings(
                    errors=type_errors,
                    warnings=report.warnings,
                    performance=report.performance,
                )
            )
        return ContentDocument(metadata=document.get("metadata"), scenes=scenes)

    # ---- pipeline ----

    def _collect_document(self, document: Any, out: Findings) -> int:
        out.errors.extend(check_structure(document))

        total = size_of(document)
        out.errors.extend(check_total_budget(document, limits=self.limits, size=total))

        # Sibling scenes are independent: one bad scene never hides another.
        for index, scene in enumerate(get_scenes(document) or []):
            out.extend(check_scene(scene, index=index, limits=self.limits))
        return total

    def _run(self, subject: str, payload: Any, collect: Collector) -> ValidationReport:
        started = self._clock()
        self._log("start", subject, _describe(payload))

        findings = Findings()
        try:
            total_size = collect(payload, findings)
            estimate = estimate_performance(total_size, self.limits)
        except Exception as e:
            self._log("error", subject, _describe(payload), err=e)
            return ValidationReport.internal_fault(str(e) or e.__class__.__name__)

        elapsed_ms = round_half_up((self._clock() - started) * 1000)
        timeout_ms = self.limits.validation_timeout_ms
        if elapsed_ms > timeout_ms:
            findings.warn(f"Validation took {elapsed_ms}ms, exceeds {timeout_ms}ms target")

        report = ValidationReport.from_findings(
            errors=findings.errors,
            warnings=findings.warnings,
            performance=estimate.to_summary(),
        )
        self._log("end", subject, report.to_dict(), metrics={"validation_ms": elapsed_ms})
        return report

    def _log(
        self,
        event: str,
        subject: str,
        payload: Any,
        *,
        metrics: Optional[Dict[str, Any]] = None,
        err: Optional[Exception] = None,
    ) -> None:
        if self._run_logger is None:
            return
        try:
            if event == "start":
                self._run_logger.start(subject, payload)
            elif event == "end":
                self._run_logger.end(subject, payload, metrics)
            elif err is not None:
                self._run_logger.error(subject, payload, err)
        except OSError as e:
            # The report must not depend on the log being writable.
            print(f"[warning] could not write validation run log: {e}", file=sys.stderr)


def validate_content(document: Any, *, limits: Optional[ValidationLimits] = None) -> ValidationReport:
    return ContentValidator(limits=limits).validate(document)


def validate_scene(
    scene: Any,
    scene_type: Union[SceneKind, str, None] = None,
    *,
    limits: Optional[ValidationLimits] = None,
) -> ValidationReport:
    return ContentValidator(limits=limits).validate_scene(scene, scene_type)


def validate_game_manifest(manifest: Any, *, limits: Optional[ValidationLimits] = None) -> ValidationReport:
    return ContentValidator(limits=limits).validate_manifest(manifest)


def validate_submission(
    content: Any,
    content_type: str = "document",
    *,
    limits: Optional[ValidationLimits] = None,
) -> ValidationReport:
    return ContentValidator(limits=limits).validate_submission(content, content_type)


def validate_batch(documents: Any, *, limits: Optional[ValidationLimits] = None) -> BatchReport:
    return ContentValidator(limits=limits).validate_batch(documents)


def accept_content(document: Any, *, limits: Optional[ValidationLimits] = None) -> ContentDocument:
    return ContentValidator(limits=limits).accept(document)
