# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Planning workspace: projects, their scenarios and saved country assumptions.

The workspace owns identifiers, timestamps and the results cache. A
scenario's `calculated_results` is written by `refresh_results` and cleared
whenever the scenario, its project or its country's saved assumptions
change.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Union

from ..api import analyze_scenario
from ..assumptions import CountryCostAssumptions, get_cost_assumptions
from ..core.errors import RecordNotFoundError
from ..core.primitives import GlobalSettings, Model
from ..scenario import AnyScenario, Project, ScenarioResults, parse_scenario
from .repository import InMemoryRepository, JsonFileRepository, Repository

logger = logging.getLogger(__name__)


class SavedCountryAssumptions(Model):
    """User-edited assumptions stored for one country code."""

    id: str  # upper-case country code
    assumptions: CountryCostAssumptions
    updated_at: Optional[datetime] = None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


def _revalidate(record: Model, changes: dict) -> Any:
    """Apply field changes through validation; `model_copy` does not validate."""
    data = record.model_dump()
    data.update(changes)
    return type(record).model_validate(data)


class PlanningWorkspace:
    """
    Create, read, update and delete projects and scenarios.

    Args:
        projects: Repository of Project records
        scenarios: Repository of scenario records (any topology)
        country_assumptions: Repository of SavedCountryAssumptions
        settings: GlobalSettings passed to every analysis

    Example:
        >>> workspace = PlanningWorkspace.in_memory()
        >>> project = workspace.create_project(project)
        >>> scenario = workspace.create_scenario(scenario.model_copy(update={"project_id": project.id}))
        >>> results = workspace.refresh_results(scenario.id)
    """

    def __init__(
        self,
        projects: Repository[Project],
        scenarios: Repository[Any],
        country_assumptions: Repository[SavedCountryAssumptions],
        settings: Optional[GlobalSettings] = None,
    ) -> None:
        self.projects = projects
        self.scenarios = scenarios
        self.country_assumptions = country_assumptions
        self.settings = settings or GlobalSettings()

    @classmethod
    def in_memory(cls, settings: Optional[GlobalSettings] = None) -> "PlanningWorkspace":
        return cls(
            InMemoryRepository(),
            InMemoryRepository(),
            InMemoryRepository(),
            settings=settings,
        )

    @classmethod
    def from_directory(
        cls, directory: Union[str, Path], settings: Optional[GlobalSettings] = None
    ) -> "PlanningWorkspace":
        """Workspace persisted as one JSON document per collection in `directory`."""
        directory = Path(directory)
        return cls(
            JsonFileRepository(directory / "projects.json", Project.model_validate),
            JsonFileRepository(directory / "scenarios.json", parse_scenario),
            JsonFileRepository(
                directory / "country_assumptions.json",
                SavedCountryAssumptions.model_validate,
            ),
            settings=settings,
        )

    # --- Projects ---

    def create_project(self, project: Project) -> Project:
        """Store a new project, assigning an id when blank and both timestamps."""
        now = _now()
        stored = project.model_copy(
            update={"id": project.id or _new_id(), "created_at": now, "updated_at": now}
        )
        self.projects.put(stored)
        logger.info(f"Created project '{stored.name}' ({stored.id})")
        return stored

    def get_project(self, project_id: str) -> Project:
        return self.projects.get(project_id)

    def list_projects(self) -> List[Project]:
        return self.projects.list()

    def update_project(self, project_id: str, **changes: Any) -> Project:
        """
        Apply field changes to a project.

        Results of the project's scenarios depend on its site, budget and
        overrides, so their cached results are cleared.
        """
        current = self.projects.get(project_id)
        changes.pop("id", None)
        changes.pop("created_at", None)
        changes["updated_at"] = _now()
        updated = _revalidate(current, changes)
        self.projects.put(updated)
        self._invalidate(self.list_scenarios(project_id))
        return updated

    def delete_project(self, project_id: str) -> None:
        """Delete a project and every scenario that belongs to it."""
        self.projects.get(project_id)
        scenarios = self.list_scenarios(project_id)
        for scenario in scenarios:
            self.scenarios.delete(scenario.id)
        self.projects.delete(project_id)
        logger.info(f"Deleted project {project_id} and {len(scenarios)} scenarios")

    # --- Scenarios ---

    def create_scenario(self, scenario: AnyScenario) -> AnyScenario:
        """
        Store a new scenario for an existing project.

        Raises:
            RecordNotFoundError: If `scenario.project_id` names no project
        """
        self.projects.get(scenario.project_id)
        now = _now()
        stored = scenario.model_copy(
            update={
                "id": scenario.id or _new_id(),
                "calculated_results": None,
                "created_at": now,
                "updated_at": now,
            }
        )
        self.scenarios.put(stored)
        logger.info(f"Created scenario '{stored.name}' ({stored.id})")
        return stored

    def get_scenario(self, scenario_id: str) -> AnyScenario:
        return self.scenarios.get(scenario_id)

    def list_scenarios(self, project_id: Optional[str] = None) -> List[AnyScenario]:
        """All scenarios, or only those of one project."""
        scenarios = self.scenarios.list()
        if project_id is None:
            return scenarios
        return [s for s in scenarios if s.project_id == project_id]

    def update_scenario(self, scenario_id: str, **changes: Any) -> AnyScenario:
        """Apply field changes to a scenario and clear its cached results."""
        current = self.scenarios.get(scenario_id)
        for frozen_field in ("id", "project_id", "project_type", "created_at"):
            changes.pop(frozen_field, None)
        changes["calculated_results"] = None
        changes["updated_at"] = _now()
        updated = _revalidate(current, changes)
        self.scenarios.put(updated)
        return updated

    def delete_scenario(self, scenario_id: str) -> None:
        self.scenarios.delete(scenario_id)

    # --- Results ---

    def refresh_results(self, scenario_id: str) -> ScenarioResults:
        """Recompute a scenario's results and write them back to the store."""
        scenario = self.scenarios.get(scenario_id)
        project = self.projects.get(scenario.project_id)
        results = analyze_scenario(
            project,
            scenario,
            assumptions=self.get_country_assumptions(project.country_code),
            settings=self.settings,
        )
        self.scenarios.put(
            scenario.model_copy(
                update={"calculated_results": results, "updated_at": _now()}
            )
        )
        logger.debug(f"Refreshed results for scenario {scenario_id}")
        return results

    def get_results(self, scenario_id: str) -> ScenarioResults:
        """Cached results of a scenario, computing them when absent."""
        scenario = self.scenarios.get(scenario_id)
        if scenario.calculated_results is not None:
            return scenario.calculated_results
        return self.refresh_results(scenario_id)

    def _invalidate(self, scenarios: List[AnyScenario]) -> None:
        for scenario in scenarios:
            if scenario.calculated_results is not None:
                self.scenarios.put(
                    scenario.model_copy(update={"calculated_results": None})
                )

    # --- Country assumptions ---

    def get_country_assumptions(self, country_code: str) -> CountryCostAssumptions:
        """Saved assumptions for a country, else the built-in defaults."""
        try:
            return self.country_assumptions.get(country_code.upper()).assumptions
        except RecordNotFoundError:
            return get_cost_assumptions(country_code)

    def set_country_assumptions(
        self, country_code: str, assumptions: CountryCostAssumptions
    ) -> CountryCostAssumptions:
        """Save assumptions for a country and clear results that used the old ones."""
        code = country_code.upper()
        self.country_assumptions.put(
            SavedCountryAssumptions(id=code, assumptions=assumptions, updated_at=_now())
        )
        self._invalidate(self._scenarios_in_country(code))
        logger.info(f"Saved custom assumptions for {code}")
        return assumptions

    def reset_country_assumptions(self, country_code: str) -> None:
        """Drop saved assumptions so the country reverts to built-in defaults."""
        code = country_code.upper()
        self.country_assumptions.delete(code)
        self._invalidate(self._scenarios_in_country(code))

    def _scenarios_in_country(self, code: str) -> List[AnyScenario]:
        project_ids = {
            p.id for p in self.projects.list() if (p.country_code or "").upper() == code
        }
        return [s for s in self.scenarios.list() if s.project_id in project_ids]
