from __future__ import annotations

from datetime import datetime, UTC
import json
from pathlib import Path
from typing import Any


REDACTED_KEYS = {
    "api_key",
    "apikey",
    "api_sig",
    "token",
    "authorization",
}


def redact_payload(value: Any) -> Any:
    if isinstance(value, dict):
        redacted: dict[str, Any] = {}
        for key, nested in value.items():
            normalized_key = str(key).lower().replace("-", "_")
            if normalized_key in REDACTED_KEYS or normalized_key.endswith("_token"):
                redacted[key] = "***REDACTED***"
            else:
                redacted[key] = redact_payload(nested)
        return redacted

    if isinstance(value, list):
        return [redact_payload(item) for item in value]

    return value


def write_integration_evidence(name: str, content: dict[str, Any], evidence_dir: Path | None = None) -> Path:
    if evidence_dir is None:
        repo_root = Path(__file__).resolve().parents[3]
        evidence_dir = repo_root / "docs" / "integration-evidence"
    evidence_dir.mkdir(parents=True, exist_ok=True)

    output_path = evidence_dir / f"{name}-latest.json"
    payload = {
        "name": name,
        "timestamp_utc": datetime.now(UTC).isoformat(),
        "content": redact_payload(content),
    }
    output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False, default=str), encoding="utf-8")
    return output_path
