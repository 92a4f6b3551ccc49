"""Tests for scoring and ring-quota smart selection."""

import pytest

from service_areas.data.models import Coordinates
from service_areas.selection.rings import classify_rings
from service_areas.selection.selector import ring_quotas, score_suburbs, smart_select


@pytest.fixture
def spread_suburbs(make_suburb):
    """Twenty suburbs from 2 to 48 km in varied directions with mixed population data."""
    layout = [
        ("Aldgate", 2, 0, 14000), ("Brompton", 0, 3, 6000), ("Croydon", -4, 0, 3000),
        ("Dulwich", 0, -5, None), ("Enfield", 7, 2, 21000), ("Fulham", -8, 3, 2500),
        ("Glenelg", 10, -4, 4000), ("Hackney", -12, -1, None), ("Ingle Farm", 14, 5, 9000),
        ("Joslin", -15, 6, 1200), ("Kilkenny", 18, 0, 17000), ("Lonsdale", 0, -20, 800),
        ("Marden", 22, 4, None), ("Norwood", -24, -6, 11000), ("Oaklands", 27, 0, 2200),
        ("Payneham", 0, 30, 5000), ("Queenstown", -33, 2, 700), ("Rosewater", 36, -5, 26000),
        ("Semaphore", -40, 0, None), ("Tranmere", 45, 14, 3100),
    ]
    return [make_suburb(name, n, e, population=pop) for name, n, e, pop in layout]


class TestRingQuotas:
    """Tests for per-ring quota allocation."""

    def test_eleven(self):
        assert ring_quotas(11) == {"inner": 2, "middle": 3, "outer": 3, "satellite": 1}

    def test_minimums_for_small_counts(self):
        """Small counts still get 2/3/3 minimums and no satellite slot."""
        assert ring_quotas(4) == {"inner": 2, "middle": 3, "outer": 3, "satellite": 0}

    def test_large_count(self):
        assert ring_quotas(40) == {"inner": 10, "middle": 14, "outer": 12, "satellite": 4}


class TestScoreSuburbs:
    """Tests for the scoring pass."""

    def test_no_population_penalty(self, make_suburb):
        """Suburbs without population score -1000."""
        scored = score_suburbs([make_suburb("Unknown")])
        assert scored[0].score == -1000

    def test_bonuses(self, make_suburb):
        """An isolated 5000-person dense suburb gets regional, commercial and density bonuses."""
        town = make_suburb("Town", population=5000, density=1500)
        scored = score_suburbs([town])
        # percentile 0 -> 0 points; +30 regional, +25 commercial, +15 density; not an outlier of itself
        assert scored[0].score == 70

    def test_percentile_tiers(self, make_suburb):
        """The most populous of ten suburbs (percentile 0.9) lands in the 80-point tier."""
        suburbs = [
            make_suburb(f"S{i}", north_km=i * 0.5, population=1000 + i * 10)
            for i in range(10)
        ]
        scored = {s.suburb.id: s.score for s in score_suburbs(suburbs)}
        # 0.9 is not > 0.9 -> 80, plus 20 as a population outlier (threshold ~1059)
        assert scored[suburbs[-1].id] == pytest.approx(100)
        # percentile 0 -> 0 points, no bonuses
        assert scored[suburbs[0].id] == pytest.approx(0)

    def test_sorted_descending_and_stable(self, make_suburb):
        """Highest score first; equal scores keep input order."""
        a = make_suburb("A")
        b = make_suburb("B")
        c = make_suburb("C", population=3000)
        scored = score_suburbs([a, b, c])
        assert [s.suburb.name for s in scored] == ["C", "A", "B"]


class TestSmartSelect:
    """Tests for ring-quota selection."""

    def test_returns_count_without_duplicates(self, spread_suburbs):
        """Eleven picks from twenty, all distinct."""
        selected = smart_select(spread_suburbs, 11)
        assert len(selected) == 11
        assert len({s.id for s in selected}) == 11

    @pytest.mark.parametrize("count", [1, 3, 5, 11, 19, 20, 25])
    def test_never_exceeds_count(self, spread_suburbs, count):
        selected = smart_select(spread_suburbs, count)
        assert len(selected) == min(count, len(spread_suburbs))
        assert len({s.id for s in selected}) == len(selected)

    def test_empty_input(self):
        assert smart_select([], 11) == []

    def test_zero_count(self, spread_suburbs):
        assert smart_select(spread_suburbs, 0) == []

    def test_ring_quota_limits_first_pass(self, make_suburb):
        """Quotas force middle-ring picks even when inner suburbs all score higher."""
        inner = [make_suburb(f"Inner {d}", north_km=d, population=20000 + d * 1000) for d in (1, 2, 3, 4, 5)]
        middle = [make_suburb(f"Middle {d}", north_km=d, population=500) for d in (16, 17, 18)]
        suburbs = inner + middle

        selected = smart_select(suburbs, 4)

        rings = classify_rings(suburbs)
        inner_ids = {s.id for s in rings["inner"]}
        middle_ids = {s.id for s in rings["middle"]}
        assert sum(1 for s in selected if s.id in inner_ids) == 2
        assert sum(1 for s in selected if s.id in middle_ids) == 2

    def test_fill_pass_uses_global_score_order(self, make_suburb):
        """When rings run dry, remaining slots follow the global score order."""
        suburbs = [make_suburb(f"S{i}", north_km=i, population=1000 * (i + 1)) for i in range(8)]
        selected = smart_select(suburbs, 5)
        expected = [entry.suburb.id for entry in score_suburbs(suburbs)[:5]]
        assert [s.id for s in selected] == expected

    def test_unpopulated_suburbs_deprioritised(self, make_suburb):
        """Populated suburbs are chosen before any suburb without data."""
        populated = [make_suburb(f"P{i}", north_km=i + 1, population=2000 + i) for i in range(3)]
        unknown = [make_suburb(f"U{i}", north_km=i + 0.5) for i in range(5)]
        selected = smart_select(unknown + populated, 3)
        assert {s.id for s in selected} == {s.id for s in populated}

    def test_unpopulated_suburbs_still_fill(self, make_suburb):
        """Without population data suburbs are still eligible, not excluded."""
        unknown = [make_suburb(f"U{i}", north_km=i) for i in range(4)]
        assert len(smart_select(unknown, 11)) == 4

    def test_explicit_center_accepted(self, spread_suburbs):
        """Passing the business center does not change the selection."""
        center = Coordinates(lat=-34.85, lng=138.58)
        assert smart_select(spread_suburbs, 11, center) == smart_select(spread_suburbs, 11)

    def test_deterministic(self, spread_suburbs):
        """Same input, same output."""
        assert smart_select(spread_suburbs, 11) == smart_select(list(spread_suburbs), 11)
