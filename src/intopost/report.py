# report.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from intopost.constants import ConstantStuff as CS
from intopost.models import ConversionResult
from intopost.tokenizer import render

logger = logging.getLogger(__name__)


def build_report(results: List[ConversionResult], source: str = "") -> Dict[str, Any]:
    entries = []
    for r in results:
        entry = {
            "line": r.expression.line_no,
            "infix": r.expression.text,
        }
        if r.ok:
            entry["postfix"] = render(r.postfix)
        else:
            entry["error"] = r.error
        entries.append(entry)

    failed = sum(1 for r in results if not r.ok)
    return {
        "source": source,
        "total_expressions": len(results),
        "converted": len(results) - failed,
        "failed": failed,
        "expressions": entries,
    }


def write_report(results: List[ConversionResult], path: str | Path, source: str = "") -> Path:
    """Write a run summary as JSON or YAML, chosen by the file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in CS.REPORT_SUFFIXES:
        raise ValueError(f"Unsupported report format '{path.suffix}' (expected one of {', '.join(CS.REPORT_SUFFIXES)})")

    data = build_report(results, source)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info("Report written → %s", path)
    return path
