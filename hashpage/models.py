from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


INDEX_TITLE = "Hash any string"
RESULT_TITLE = "Your hash result!"


# === Render context handed to the templates ===


@dataclass
class PageContext:
    page_title: str
    hash_width: int
    string_hash: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if self.string_hash is None:
            del data["string_hash"]
        return data
