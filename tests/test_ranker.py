"""Tests for batch ranking."""

from fuzzy_tui.search import CachedSearchable, Span, cached, rank_all


class TestRankAll:
    """Tests for rank_all()."""

    def test_filters_non_matches(self, wash_candidates):
        """Items that don't match are dropped."""
        ranked = rank_all(wash_candidates, "wash")
        assert [r.item for r in ranked] == [
            "Ladies Wash, Cut & Blow Dry",
            "Wash & Go",
            "Go to wash",
        ]

    def test_sorted_by_weight(self):
        """Higher weights come first."""
        items = ["Ladies Wash, Cut & Blow Dry", "World in ashes", "Wash & Go"]
        ranked = rank_all(items, "wash")
        assert [r.item for r in ranked] == [
            "Ladies Wash, Cut & Blow Dry",
            "Wash & Go",
            "World in ashes",
        ]
        weights = [r.weight for r in ranked]
        assert weights == sorted(weights, reverse=True)

    def test_ties_keep_input_order(self):
        """Equal weights keep their original relative order."""
        items = ["b wash", "a wash", "c wash"]
        ranked = rank_all(items, "wash")
        assert len({r.weight for r in ranked}) == 1
        assert [r.item for r in ranked] == items

    def test_results_carry_ranges(self):
        """Each result includes its match ranges."""
        ranked = rank_all(["Go to wash"], "wash")
        assert ranked[0].ranges == (Span(6, 4),)
        assert ranked[0].result.matched

    def test_weight_mirrors_result(self):
        """weight and ranges come straight from the match result."""
        ranked = rank_all(["Go to wash"], "wash")[0]
        assert ranked.weight == ranked.result.weight == 15
        assert ranked.ranges is ranked.result.ranges

    def test_empty_pattern_matches_nothing(self, wash_candidates):
        """An empty pattern has zero weight everywhere, so nothing is kept."""
        assert rank_all(wash_candidates, "") == []

    def test_empty_items(self):
        """No items, no results."""
        assert rank_all([], "wash") == []

    def test_accepts_generator(self, wash_candidates):
        """Any iterable of items can be ranked."""
        ranked = rank_all((item for item in wash_candidates), "go")
        assert {r.item for r in ranked} == {"Wash & Go", "Go to wash"}


class TestRankAllInputs:
    """rank_all works over any matchable value."""

    def test_cached_items(self, wash_candidates):
        """Cached wrappers rank the same as plain strings."""
        plain = rank_all(wash_candidates, "wash")
        wrapped = rank_all(cached(wash_candidates), "wash")
        assert [r.item.wrapped for r in wrapped] == [r.item for r in plain]
        assert all(isinstance(r.item, CachedSearchable) for r in wrapped)

    def test_searchable_objects(self, sample_countries):
        """Objects with fuzzy_text are matched on that text."""
        ranked = rank_all(sample_countries, "reu")
        assert [r.item.code for r in ranked] == ["RE"]

    def test_key_function(self):
        """A key function extracts text from arbitrary items."""
        items = [{"name": "Groceries"}, {"name": "Gas"}, {"name": "Rent"}]
        ranked = rank_all(items, "gas", key=lambda d: d["name"])
        assert [r.item["name"] for r in ranked] == ["Gas"]

    def test_workers_match_serial(self, wash_candidates):
        """Threaded scoring gives the same ordering as serial scoring."""
        items = wash_candidates * 10
        assert rank_all(items, "wash", workers=4) == rank_all(items, "wash")
