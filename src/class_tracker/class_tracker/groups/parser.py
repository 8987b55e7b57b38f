from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence

from ..core.constants import MIN_CONSTRAINT_SIZE
from ..students.model import Student
from .model import ExclusionConstraint

# ASCII comma, full-width comma, whitespace
_TOKEN_SEPARATOR = re.compile(r"[,，\s]+")


def _split_names(line: str) -> List[str]:
    return [p.strip() for p in _TOKEN_SEPARATOR.split(line) if p.strip()]


def parse_exclusion_constraints(text: Optional[str], roster: Sequence[Student]) -> List[ExclusionConstraint]:
    """Turn free text (one rule per line) into exclusion constraints.

    Names are matched exactly against the roster. Unknown names are dropped,
    and a line is kept only when 2+ distinct students resolve. When two
    students share a name the first one in roster order is used.
    """
    if not text or not text.strip():
        return []

    id_by_name: Dict[str, str] = {}
    for s in roster:
        id_by_name.setdefault(s.name, s.student_id)

    constraints: List[ExclusionConstraint] = []
    for raw_line in text.strip().split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        names = _split_names(line)
        if len(names) < MIN_CONSTRAINT_SIZE:
            continue

        ids: List[str] = []
        for name in names:
            sid = id_by_name.get(name)
            if sid is not None and sid not in ids:
                ids.append(sid)

        if len(ids) >= MIN_CONSTRAINT_SIZE:
            constraints.append(ExclusionConstraint(position=len(constraints), student_ids=tuple(ids)))

    return constraints
