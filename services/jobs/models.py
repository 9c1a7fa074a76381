"""Job model and normalization of JSearch postings."""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from typing import Any

DEFAULT_EMPLOYER_LOGO = "https://i.imgur.com/DNLN3Q1.png"
DEFAULT_EMPLOYMENT_TYPE = "Full-time"
DEFAULT_CITY = "Remote"
DEFAULT_EMPLOYER_NAME = "N/A"
DEFAULT_APPLY_LINK = "#"

# JSearch employment type codes -> labels shown on job cards
EMPLOYMENT_TYPE_LABELS = {
    "FULLTIME": "Full-time",
    "PARTTIME": "Part-time",
    "CONTRACTOR": "Contractor",
    "TEMPORARY": "Temporary",
    "INTERN": "Intern",
}


@dataclass
class Job:
    id: str
    title: str
    employer_name: str = DEFAULT_EMPLOYER_NAME
    employer_logo: str = DEFAULT_EMPLOYER_LOGO
    city: str = DEFAULT_CITY
    employment_type: str = DEFAULT_EMPLOYMENT_TYPE
    apply_link: str = DEFAULT_APPLY_LINK
    description: str = ""
    highlights: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Job:
        """Rebuild a Job from its ``to_dict`` form, as returned by /api/jobs."""
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            employer_name=data.get("employer_name") or DEFAULT_EMPLOYER_NAME,
            employer_logo=data.get("employer_logo") or DEFAULT_EMPLOYER_LOGO,
            city=data.get("city") or DEFAULT_CITY,
            employment_type=data.get("employment_type") or DEFAULT_EMPLOYMENT_TYPE,
            apply_link=data.get("apply_link") or DEFAULT_APPLY_LINK,
            description=data.get("description") or "",
            highlights=dict(data.get("highlights") or {}),
        )


def _employment_type(raw: Any) -> str:
    if not raw or not isinstance(raw, str):
        return DEFAULT_EMPLOYMENT_TYPE
    # JSearch sometimes sends a comma separated list, e.g. "FULLTIME, PARTTIME"
    first = raw.split(",")[0].strip()
    return EMPLOYMENT_TYPE_LABELS.get(first.upper(), first)


def _text(raw: Any, default: str = "") -> str:
    """String value of an upstream field, or ``default`` when absent or not scalar."""
    if isinstance(raw, str):
        return raw.strip() or default
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return default


def _highlights(raw: Any) -> dict[str, list[str]]:
    if not isinstance(raw, dict):
        return {}
    out = {}
    for section, items in raw.items():
        if isinstance(items, list):
            out[str(section)] = [str(item) for item in items if item]
        elif items:
            out[str(section)] = [str(items)]
    return out


def normalize_posting(hit: dict[str, Any]) -> Job:
    """Map one JSearch posting onto a Job, filling defaults for absent fields."""
    title = _text(hit.get("job_title"))
    employer_name = _text(hit.get("employer_name"), DEFAULT_EMPLOYER_NAME)
    apply_link = _text(hit.get("job_apply_link"), DEFAULT_APPLY_LINK)
    job_id = _text(hit.get("job_id"))
    if not job_id:
        seed = f"{title}|{_text(hit.get('employer_name'))}|{_text(hit.get('job_apply_link'))}"
        job_id = hashlib.sha256(seed.encode("utf-8")).hexdigest()[:12]

    return Job(
        id=job_id,
        title=title,
        employer_name=employer_name,
        employer_logo=_text(hit.get("employer_logo"), DEFAULT_EMPLOYER_LOGO),
        city=_text(hit.get("job_city"), DEFAULT_CITY),
        employment_type=_employment_type(hit.get("job_employment_type")),
        apply_link=apply_link,
        description=_text(hit.get("job_description")),
        highlights=_highlights(hit.get("job_highlights")),
    )


def normalize_search_response(payload: Any) -> list[Job]:
    """Normalize a JSearch search response into a list of Jobs.

    Accepts the usual ``{"data": [...]}`` envelope or a bare list. Anything
    else yields an empty list; non-dict entries are skipped.
    """
    if isinstance(payload, dict):
        hits = payload.get("data") or []
    elif isinstance(payload, list):
        hits = payload
    else:
        hits = []

    if not isinstance(hits, list):
        return []
    return [normalize_posting(hit) for hit in hits if isinstance(hit, dict)]
