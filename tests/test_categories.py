import pytest

from hikelog.analytics.categories import (
    demanding_hikes,
    demanding_scores,
    food_hikes,
    hikes_mentioning,
    scenic_hikes,
    weather_hikes,
)
from hikelog.data.schemas import ScoringConfig
from hikelog.data.store import RecordStore

HEADER = "Num,Date,Comments,Link,Location,Miles,Elevation\n"


def test_mount_dana_scenario_score():
    text = "Num,Date,Comments,Link,Loc,Miles,Elev\n1,1/1/20,Nice strenuous climb,,Mount Dana,8,2400\n"
    (scored,) = demanding_hikes(RecordStore.from_text(text))
    assert scored.hike.id == 1
    assert scored.score == 15400.0


def test_demanding_ranking(snapshot):
    ranked = demanding_hikes(snapshot)
    assert [s.hike.id for s in ranked] == [25, 50, 1, 2, 27, 26, 51]
    assert [s.score for s in ranked] == [16100.0, 14000.0, 5100.0, 4750.0, 2900.0, 1700.0, 1000.0]


def test_zero_effort_hikes_are_still_ranked():
    text = HEADER + "1,1/1/20,,,,0,0\n2,1/1/20,,,,1,0\n"
    ranked = demanding_hikes(RecordStore.from_text(text))
    assert [(s.hike.id, s.score) for s in ranked] == [(2, 500.0), (1, 0.0)]


def test_demanding_caps_at_fifteen():
    rows = "".join(f"{i},1/1/20,,,,{i},0\n" for i in range(1, 21))
    ranked = demanding_hikes(RecordStore.from_text(HEADER + rows))
    assert len(ranked) == 15
    assert ranked[0].hike.id == 20


def test_equal_scores_keep_id_descending_order():
    text = HEADER + "1,,,,,2,0\n5,,,,,2,0\n3,,,,,2,0\n"
    assert [s.hike.id for s in demanding_hikes(RecordStore.from_text(text))] == [5, 3, 1]


def test_priority_match_in_comments_counts_once():
    text = HEADER + "1,,Trip to Everest base camp,,Nepal,0,0\n"
    assert list(demanding_scores(RecordStore.from_text(text))) == [8000.0]


def test_difficulty_keyword_only_checked_in_comments():
    text = HEADER + "1,,,,Steep Ravine,0,0\n2,,So STEEP,,Somewhere,0,0\n"
    scores = demanding_scores(RecordStore.from_text(text))
    # frame position 0 is id 2
    assert list(scores) == [1000.0, 0.0]


def test_custom_scoring_tables():
    scoring = ScoringConfig(
        mile_weight=1.0,
        elevation_weight=0.0,
        priority_bonus=100.0,
        keyword_bonus=10.0,
        priority_locations=("home",),
        difficulty_keywords=("ouch",),
        demanding_limit=1,
    )
    text = HEADER + "1,,ouch,,Home Trail,3,999\n2,,fine,,Away,50,0\n"
    ranked = demanding_hikes(RecordStore.from_text(text), scoring)
    assert [(s.hike.id, s.score) for s in ranked] == [(1, 113.0)]
    assert list(demanding_scores(RecordStore.from_text(text), scoring)) == [50.0, 113.0]


def test_themes(snapshot):
    assert [h.id for h in scenic_hikes(snapshot)] == [50, 1]
    assert [h.id for h in weather_hikes(snapshot)] == [2]
    assert [h.id for h in food_hikes(snapshot)] == [27, 25]


def test_theme_keywords_are_literal_and_case_insensitive():
    text = HEADER + "1,,Saw a VIEW (wow),,,,\n2,,view.point,,,,\n3,,viewXpoint,,,,\n4,,nothing,,,,\n"
    store = RecordStore.from_text(text)
    assert [h.id for h in hikes_mentioning(store, ["(WOW)", "view."])] == [2, 1]
    assert [h.id for h in hikes_mentioning(store, ["view.point"])] == [2]


def test_themes_cap_at_fifteen_in_store_order():
    rows = "".join(f"{i},1/1/20,Beautiful day,,,1,1\n" for i in range(1, 21))
    hikes = scenic_hikes(RecordStore.from_text(HEADER + rows))
    assert [h.id for h in hikes] == list(range(20, 5, -1))


@pytest.mark.parametrize("compute", [demanding_hikes, scenic_hikes, weather_hikes, food_hikes])
def test_empty_store(compute):
    assert compute(RecordStore()) == []
