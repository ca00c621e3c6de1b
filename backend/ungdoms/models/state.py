"""Shape of the whole JSON document backing the store."""

import logging
from typing import Any

from pydantic import Field, ValidationError
from pydantic.alias_generators import to_camel

from ungdoms.models.base import CamelModel
from ungdoms.models.people import Client, Staff
from ungdoms.models.plans import CarePlan, ImplementationPlan
from ungdoms.models.reporting import MonthlyReport, VimsaTime, WeeklyDocumentation

logger = logging.getLogger(__name__)

# Collection attribute name -> record model, in document order
COLLECTIONS: dict[str, type] = {
    "staff": Staff,
    "clients": Client,
    "care_plans": CarePlan,
    "implementation_plans": ImplementationPlan,
    "weekly_documentation": WeeklyDocumentation,
    "monthly_reports": MonthlyReport,
    "vimsa_time": VimsaTime,
}


def _fold_legacy_weekly_docs(data: dict[str, Any]) -> dict[str, Any]:
    if "weeklyDocs" not in data:
        return data

    data = dict(data)
    legacy = data.pop("weeklyDocs") or []
    current = list(data.get("weeklyDocumentation") or [])
    seen = {row.get("id") for row in current if isinstance(row, dict)}
    merged = 0
    for row in legacy:
        if isinstance(row, dict) and row.get("id") in seen:
            continue
        current.append(row)
        merged += 1

    if merged:
        logger.info("Merged legacy weeklyDocs rows", extra={"rows": merged})
    data["weeklyDocumentation"] = current
    return data


class StoreState(CamelModel):
    """
    Every entity collection, each an insertion-ordered list.

    Missing top-level keys load as empty lists. Older documents kept weekly
    documentation under ``weeklyDocs``; those rows are folded into
    ``weeklyDocumentation`` by ``from_document``.
    """

    staff: list[Staff] = Field(default_factory=list)
    clients: list[Client] = Field(default_factory=list)
    care_plans: list[CarePlan] = Field(default_factory=list)
    implementation_plans: list[ImplementationPlan] = Field(default_factory=list)
    weekly_documentation: list[WeeklyDocumentation] = Field(default_factory=list)
    monthly_reports: list[MonthlyReport] = Field(default_factory=list)
    vimsa_time: list[VimsaTime] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> tuple["StoreState", list[dict[str, Any]]]:
        """
        Build state from a parsed document, validating each record on its own.

        A record that does not match its model is left out instead of
        failing the whole document. So is a collection that is not a list.

        Args:
            document: Top-level JSON object as read from disk

        Returns:
            The loaded state and one entry per rejected record, each with
            ``collection``, ``id`` and ``errors`` keys
        """
        document = _fold_legacy_weekly_docs(document)
        state = cls()
        rejected: list[dict[str, Any]] = []

        for name, model in COLLECTIONS.items():
            key = to_camel(name)
            rows = document.get(key)
            if rows is None:
                continue
            if not isinstance(rows, list):
                rejected.append({"collection": key, "id": None, "errors": 1})
                continue

            records = getattr(state, name)
            for row in rows:
                try:
                    records.append(model.model_validate(row))
                except ValidationError as e:
                    record_id = row.get("id") if isinstance(row, dict) else None
                    rejected.append({"collection": key, "id": record_id, "errors": e.error_count()})

        return state, rejected

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        return {name: len(getattr(self, name)) for name in COLLECTIONS}
