from __future__ import annotations
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any, Dict


def _required_str(obj: Dict[str, Any], key: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise ValueError(f"result field {key!r} missing or not a string: {value!r}")
    return value


def _optional_number(obj: Dict[str, Any], key: str) -> float:
    value = obj.get(key, 0)
    if value is None:
        return 0.0
    # bool is an int subclass, but never a valid distance or probability
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"result field {key!r} is not numeric: {value!r}")
    return float(value)


@dataclass(frozen=True)
class Candidate:
    """One entry of a label-lookup response."""
    matched_label: str
    canon_label: str
    name: str
    dist: float = 0.0
    prob: float = 0.0
    page_id: int = 0

    @property
    def is_exact(self) -> bool:
        return self.dist == 0

    def with_prob(self, prob: float) -> Candidate:
        return replace(self, prob=prob)

    @classmethod
    def from_json(cls, obj: Any) -> Candidate:
        """
        Build a Candidate from a lookup service result object.

        Raises ValueError when *obj* is not an object or a field is malformed.
        """
        if not isinstance(obj, dict):
            raise ValueError(f"result entry is not an object: {obj!r}")
        return cls(
            matched_label=_required_str(obj, "matchedLabel"),
            canon_label=_required_str(obj, "canonLabel"),
            name=_required_str(obj, "name"),
            dist=_optional_number(obj, "dist"),
            prob=_optional_number(obj, "prob"),
            page_id=int(_optional_number(obj, "pageID")),
        )


@dataclass(frozen=True)
class ResolvedArticle:
    """
    A canonical DBpedia article reached from a Candidate.

    ``matched_label``, ``canon_label``, ``dist`` and ``prob`` come from the
    Candidate that was looked up; ``name``, ``page_id``, ``label`` and
    ``score`` describe the article itself.
    """
    page_id: int
    name: str
    label: str
    matched_label: str
    canon_label: str
    dist: float
    score: float
    prob: float

    @classmethod
    def from_candidate(
        cls, base: Candidate, *, page_id: int, name: str, label: str, score: float
    ) -> ResolvedArticle:
        return cls(
            page_id=page_id,
            name=name,
            label=label,
            matched_label=base.matched_label,
            canon_label=base.canon_label,
            dist=base.dist,
            score=score,
            prob=base.prob,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pageID": self.page_id,
            "name": self.name,
            "label": self.label,
            "matchedLabel": self.matched_label,
            "canonLabel": self.canon_label,
            "dist": self.dist,
            "score": self.score,
            "prob": self.prob,
        }
