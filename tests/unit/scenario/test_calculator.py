# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the scenario results calculator."""

from __future__ import annotations

import pytest

from habitable.assumptions import BudgetRange, DensityThresholds, InfrastructureWarningLevels
from habitable.core import ConfigurationError
from habitable.core.primitives import (
    BudgetStatusEnum,
    DensityClassEnum,
    InfrastructureStatusEnum,
)
from habitable.scenario import (
    ApartmentScenario,
    MixedScenario,
    SingleFamilyScenario,
    UnitMix,
    apply_scenario_defaults,
    classify_budget,
    classify_density,
    classify_infrastructure,
    compute_scenario_results,
    split_units,
)
from tests.conftest import make_apartment


class TestApartment:
    """The reference 8 x 4 apartment block."""

    def test_unit_counts(self, apartment_results):
        breakdown = apartment_results.unit_breakdown
        assert apartment_results.total_units == 32
        assert (breakdown.one_bedroom, breakdown.two_bedroom, breakdown.three_bedroom) == (13, 11, 8)

    def test_population_and_area(self, apartment_results):
        assert apartment_results.estimated_population == pytest.approx(107)
        assert apartment_results.built_up_area == pytest.approx(1_920)

    def test_costs(self, apartment_results):
        costs = apartment_results.cost_breakdown
        assert costs.construction == pytest.approx(768_000)
        assert costs.infrastructure == pytest.approx(480_000)
        assert costs.soft_costs == pytest.approx(187_200)
        assert costs.contingency == pytest.approx(124_800)
        assert apartment_results.total_project_cost == pytest.approx(1_560_000)
        assert apartment_results.cost_per_unit == pytest.approx(48_750)
        assert apartment_results.cost_per_person == pytest.approx(1_560_000 / 107)

    def test_breakdown_sums_to_total(self, apartment_results):
        assert apartment_results.cost_breakdown.total == pytest.approx(
            apartment_results.total_project_cost
        )

    def test_classifications(self, apartment_results):
        assert apartment_results.density_per_hectare == pytest.approx(32 / 0.192)
        assert apartment_results.density_classification == DensityClassEnum.MEDIUM
        assert apartment_results.budget_status == BudgetStatusEnum.WITHIN
        # 107 people x 50 L = 5,350 L/day
        assert apartment_results.daily_water_demand == pytest.approx(5_350)
        assert apartment_results.infrastructure_status == InfrastructureStatusEnum.EXCEEDS

    def test_utilities(self, apartment_results):
        assert apartment_results.electricity_demand == pytest.approx(107 * 2.5)
        assert apartment_results.waste_generation == pytest.approx(107 * 0.6)

    def test_land_coverage(self, apartment_results):
        assert apartment_results.land_coverage_percentage == pytest.approx(
            1_920 / (5_000 * 10_000) * 100
        )

    def test_defaults_for_unit_size_and_shared_space(self, budget, kenya):
        scenario = make_apartment(unit_size=None, shared_space_percentage=None)
        results = compute_scenario_results(scenario, budget, 5_000, kenya)
        assert results.built_up_area == pytest.approx(32 * 50 * 1.2)

    def test_explicit_zero_shared_space_is_honoured(self, budget, kenya):
        scenario = make_apartment(shared_space_percentage=0)
        results = compute_scenario_results(scenario, budget, 5_000, kenya)
        assert results.built_up_area == pytest.approx(1_600)

    @pytest.mark.parametrize("missing", ["units_per_floor", "number_of_floors", "unit_mix"])
    def test_missing_structural_field(self, missing, budget, kenya):
        scenario = make_apartment(**{missing: None})
        with pytest.raises(ConfigurationError) as exc_info:
            compute_scenario_results(scenario, budget, 5_000, kenya)
        assert exc_info.value.missing_fields == [missing]

    def test_input_is_not_modified(self, apartment, budget, kenya):
        snapshot = apartment.model_dump()
        compute_scenario_results(apartment, budget, 5_000, kenya)
        assert apartment.model_dump() == snapshot


class TestSingleFamilyAndMixed:
    def test_single_family(self, single_family, budget, kenya):
        results = compute_scenario_results(single_family, budget, 10_000, kenya)
        assert results.total_units == 20
        assert results.unit_breakdown.single_family == 20
        assert results.estimated_population == 80
        assert results.built_up_area == pytest.approx(1_800)
        assert results.total_project_cost == pytest.approx((630_000 + 300_000) * 1.25)

    def test_single_family_house_size_fallbacks(self, budget, kenya):
        from_unit_size = SingleFamilyScenario(number_of_units=10, unit_size=80)
        from_default = SingleFamilyScenario(number_of_units=10)
        assert compute_scenario_results(from_unit_size, budget, 0, kenya).built_up_area == 800
        assert compute_scenario_results(from_default, budget, 0, kenya).built_up_area == 1_500

    def test_mixed(self, mixed, budget, kenya):
        results = compute_scenario_results(mixed, budget, 10_000, kenya)
        assert results.total_units == 40
        assert results.unit_breakdown.mixed == 40
        assert results.estimated_population == pytest.approx(40 * (2.5 + 3.5) / 2)
        assert results.built_up_area == pytest.approx(2_400)


class TestZeroUnits:
    """An empty scenario never divides by zero."""

    def test_zero_units(self, budget, kenya):
        results = compute_scenario_results(MixedScenario(), budget, 5_000, kenya)
        assert results.total_units == 0
        assert results.cost_per_unit == 0
        assert results.cost_per_person == 0
        assert results.density_per_hectare == 0
        assert results.land_coverage_percentage == 0
        assert results.density_classification == DensityClassEnum.LOW
        assert results.budget_status == BudgetStatusEnum.UNDER

    def test_zero_land_size(self, apartment, budget, kenya):
        results = compute_scenario_results(apartment, budget, 0, kenya)
        assert results.land_coverage_percentage == 0


class TestUnitSplit:
    @pytest.mark.parametrize("total", [1, 7, 32, 99, 250])
    @pytest.mark.parametrize(
        "mix", [(40, 35, 25), (33.3, 33.3, 33.4), (50, 50, 0), (0, 0, 100), (15, 15, 70)]
    )
    def test_counts_sum_to_total(self, total, mix):
        counts = split_units(total, UnitMix(one_bedroom=mix[0], two_bedroom=mix[1], three_bedroom=mix[2]))
        assert sum(counts) == total

    def test_reference_split(self):
        mix = UnitMix(one_bedroom=40, two_bedroom=35, three_bedroom=25)
        assert split_units(32, mix) == (13, 11, 8)


class TestProperties:
    def test_cost_monotonic_in_construction_cost(self, budget, kenya):
        totals = [
            compute_scenario_results(
                make_apartment(construction_cost_per_sqm=rate), budget, 5_000, kenya
            ).total_project_cost
            for rate in (0, 100, 250, 400, 1_000)
        ]
        assert totals == sorted(totals)

    def test_cost_monotonic_in_units(self, budget, kenya):
        totals = [
            compute_scenario_results(
                make_apartment(units_per_floor=units), budget, 5_000, kenya
            ).total_project_cost
            for units in (1, 4, 8, 16, 40)
        ]
        assert totals == sorted(totals)

    def test_density_classification_monotonic(self):
        thresholds = DensityThresholds()
        ranks = [classify_density(d, thresholds).rank for d in range(0, 800, 5)]
        assert ranks == sorted(ranks)

    @pytest.mark.parametrize(
        "density, expected",
        [
            (150, DensityClassEnum.LOW),
            (150.01, DensityClassEnum.MEDIUM),
            (300.01, DensityClassEnum.HIGH),
            (500.01, DensityClassEnum.VERY_HIGH),
        ],
    )
    def test_density_bands_are_strict(self, density, expected):
        assert classify_density(density, DensityThresholds()) == expected

    @pytest.mark.parametrize(
        "cost, expected",
        [
            (0, BudgetStatusEnum.UNDER),
            (999_999.99, BudgetStatusEnum.UNDER),
            (1_000_000, BudgetStatusEnum.WITHIN),
            (3_000_000, BudgetStatusEnum.WITHIN),
            (3_000_000.01, BudgetStatusEnum.OVER),
        ],
    )
    def test_budget_partition(self, cost, expected):
        assert classify_budget(cost, BudgetRange(min=1_000_000, max=3_000_000)) == expected

    @pytest.mark.parametrize(
        "water, population, expected",
        [
            (1_000, 100, InfrastructureStatusEnum.OK),
            (3_001, 100, InfrastructureStatusEnum.WARNING),
            (1_000, 8_001, InfrastructureStatusEnum.WARNING),
            (5_001, 100, InfrastructureStatusEnum.EXCEEDS),
            (1_000, 15_001, InfrastructureStatusEnum.EXCEEDS),
        ],
    )
    def test_infrastructure_status(self, water, population, expected):
        assert (
            classify_infrastructure(water, population, InfrastructureWarningLevels())
            == expected
        )


class TestDefaults:
    def test_apply_defaults_returns_copy(self, settings):
        scenario = make_apartment(unit_size=0, shared_space_percentage=None)
        resolved = apply_scenario_defaults(scenario, settings.cost)
        assert resolved.unit_size == 50
        assert resolved.shared_space_percentage == 20
        assert scenario.unit_size == 0

    def test_zero_floors_treated_as_missing(self, settings):
        with pytest.raises(ConfigurationError):
            apply_scenario_defaults(make_apartment(number_of_floors=0), settings.cost)

    def test_blank_apartment_rejected(self, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            apply_scenario_defaults(ApartmentScenario(), settings.cost)
        assert exc_info.value.missing_fields == [
            "units_per_floor",
            "number_of_floors",
            "unit_mix",
        ]
