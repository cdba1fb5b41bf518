import json

from ..algorithms.utils import DiffResult, OpType
from .base import BaseFormatter, FormatterFactory


def _jsonable(value: object) -> object:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        return value.decode('latin-1')
    return repr(value)


@FormatterFactory.register("json")
class JSONFormatter(BaseFormatter):
    def _format_impl(self, result: DiffResult):
        payload = {
            "distance": result.distance,
            "source_length": len(result.source),
            "target_length": len(result.target),
            "similarity": round(result.similarity_ratio, 6),
            "edits": [],
            "stats": result.counts(),
        }
        for edit in result.edits:
            entry = {"op": edit.op.value, "position": edit.position}
            if edit.op != OpType.DELETE:
                entry["value"] = _jsonable(edit.value)
            payload["edits"].append(entry)
        self._write(json.dumps(payload, indent=2, ensure_ascii=False))
