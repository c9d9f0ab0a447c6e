from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List


class AuditLogger:
    """
    Writes structured JSONL events, one line per resolved request.
    Used by both the in-process mock client and the dev server.
    """

    def __init__(self, path: str, component: str = "mockhttp"):
        self.path = Path(path)
        self.component = component
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, event: Dict[str, Any]) -> None:
        event = dict(event)
        event.setdefault("ts", time.time())
        event.setdefault("component", self.component)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")

    def events(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        lines = self.path.read_text(encoding="utf-8").strip().splitlines()
        return [json.loads(line) for line in lines if line]
