from datetime import date

from lifeatlas.data_model import MonthlyProjection, Phase, PhaseCategory, StressScore
from lifeatlas.engine.stress import (
    WEIGHTS,
    compute_stress_scores,
    get_minimum_free_time,
    get_peak_stress,
    get_red_zone_months,
    score_month,
)

START = date(2024, 1, 1)


def make_phase(phase_id="p1", load=0.0, emotional=0.0, caregiving=0.0, start=START, end=date(2030, 1, 1)):
    return Phase(
        id=phase_id,
        name=phase_id,
        category=PhaseCategory.CAREER,
        start_date=start,
        end_date=end,
        load_time_cost=load,
        emotional_intensity=emotional,
        caregiving_hours=caregiving,
    )


def projection(cashflow, month="2024-01"):
    return MonthlyProjection(
        month=month,
        total_income=max(cashflow, 0),
        total_expenses=max(-cashflow, 0),
        net_cashflow=cashflow,
        net_worth=0,
        net_worth_low=0,
        net_worth_high=0,
    )


def stress(month, composite, free_time=0):
    return StressScore(
        month=month,
        composite=composite,
        free_time=free_time,
        financial_surplus=0,
        overlap_count=0,
        caregiving_load=0,
        sleep_proxy=0,
        emotional_load=0,
    )


def test_weights_sum_to_one():
    assert round(sum(WEIGHTS.values()), 6) == 1.0


def test_scores_stay_in_range_under_extreme_inputs():
    phases = [make_phase(str(i), load=100, emotional=100, caregiving=200) for i in range(10)]

    score = score_month("2024-01", phases, projection(-1_000_000))

    assert score.composite == 100
    for value in (score.free_time, score.financial_surplus, score.overlap_count, score.caregiving_load, score.sleep_proxy, score.emotional_load):
        assert 0 <= value <= 100


def test_quiet_month_with_surplus_is_low_stress():
    score = score_month("2024-01", [], projection(2000))

    assert score.composite < 10
    assert score.financial_surplus == 20
    assert score.emotional_load == 0


def test_overlapping_heavy_phases_outscore_a_single_light_one():
    heavy = [make_phase("a", load=60, emotional=80), make_phase("b", load=50, emotional=70)]
    light = [make_phase("c", load=10, emotional=10)]

    assert score_month("2024-01", heavy, projection(0)).composite > score_month("2024-01", light, projection(0)).composite


def test_sleep_proxy_kicks_in_above_sixty_percent_load():
    assert score_month("2024-01", [make_phase(load=60)], None).sleep_proxy == 0
    assert score_month("2024-01", [make_phase(load=80)], None).sleep_proxy == 50


def test_free_time_reports_load():
    score = score_month("2024-01", [make_phase("a", load=30), make_phase("b", load=45)], None)

    assert score.free_time == 75
    assert score.overlap_count == 40


def test_caregiving_hours_scale_against_a_work_week():
    assert score_month("2024-01", [make_phase(caregiving=20)], None).caregiving_load == 50


def test_missing_projection_scores_no_financial_stress():
    assert score_month("2024-01", [], None).financial_surplus == 0


def test_deficit_drives_financial_score():
    assert score_month("2024-01", [], projection(-2500)).financial_surplus == 50


def test_phase_activity_is_inclusive_of_both_ends():
    phase = make_phase(load=10, start=date(2024, 2, 1), end=date(2024, 3, 1))

    scores = compute_stress_scores([phase], [], START, 4)

    assert [s.month for s in scores] == ["2024-01", "2024-02", "2024-03", "2024-04"]
    assert [s.overlap_count for s in scores] == [0, 20, 20, 0]


def test_scores_join_projections_by_month():
    projections = [projection(-5000, "2024-01"), projection(-5000, "2024-02")]

    scores = compute_stress_scores([], projections, START, 3)

    assert [s.financial_surplus for s in scores] == [100, 100, 0]


def test_red_zone_counts_months_at_or_above_threshold():
    scores = [stress("2024-01", 80), stress("2024-02", 50), stress("2024-03", 75)]

    assert get_red_zone_months(scores, threshold=80) == 1
    assert get_red_zone_months(scores) == 2


def test_peak_stress_prefers_the_earliest_tie():
    scores = [stress("2024-01", 40), stress("2024-02", 90), stress("2024-03", 90)]

    assert get_peak_stress(scores).month == "2024-02"
    assert get_peak_stress([]) is None


def test_minimum_free_time():
    assert get_minimum_free_time([stress("2024-01", 0, free_time=20), stress("2024-02", 0, free_time=70)]) == 30
    assert get_minimum_free_time([]) == 100
