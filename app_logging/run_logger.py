import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional


def utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


@dataclass
class ValidationRunLogger:
    """
    Append-only JSONL log of validation runs.

    One line per event (start / end / error), keyed by run_id and the
    subject being validated (document, scene, manifest).
    """
    run_id: str
    log_path: Path

    def _event(self, subject: str, event: str, status: str, **fields: Any) -> None:
        record = {
            "ts": utc_iso(),
            "run_id": self.run_id,
            "subject": subject,
            "event": event,
            "status": status,
            **fields,
        }
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")

    def start(self, subject: str, summary: Any) -> None:
        self._event(subject, "start", "ok", input=summary)

    def end(self, subject: str, report: Any, metrics: Optional[dict[str, Any]] = None) -> None:
        self._event(subject, "end", "ok", output=report, metrics=metrics or {})

    def error(self, subject: str, summary: Any, err: Exception) -> None:
        self._event(
            subject,
            "error",
            "error",
            input=summary,
            error={"type": err.__class__.__name__, "message": str(err)},
        )
