"""Tests for knowledge-base date extraction.

Covers:
- Rule matching and conversion to years before comparison
- Infobox field parsing
- Formation / activity / current-state derivation and fallbacks
"""

from __future__ import annotations

import re

import pytest

from planetary_atlas.core.constants import (
    PHASE_CURRENT_STATE,
    PHASE_FORMATION,
    PHASE_LAST_ERUPTION,
    PHASE_LAST_MAJOR_ACTIVITY,
    PHASE_MAJOR_ACTIVITY,
    SOURCE_ESTIMATED,
    SOURCE_KNOWLEDGE_BASE,
    SOURCE_KNOWLEDGE_BASE_INFOBOX,
)
from planetary_atlas.models.feature import Feature
from planetary_atlas.models.knowledge import KnowledgeBasePage
from planetary_atlas.timeline.extraction import (
    ACTIVITY_RULES,
    FORMATION_RULES,
    DateRule,
    build_knowledge_base_events,
    find_date_matches,
    most_recent,
    parse_infobox,
)


def _page(text: str, *, intro: str = "", infobox: dict[str, str] | None = None) -> KnowledgeBasePage:
    return KnowledgeBasePage(
        title="Page",
        url="https://en.wikipedia.org/wiki/Page",
        intro=intro,
        full_text=text,
        infobox=infobox or {},
    )


class TestDateMatching:
    def test_formation_rule(self) -> None:
        [match] = find_date_matches("It formed about 3.5 billion years ago.", FORMATION_RULES)
        assert match.years == pytest.approx(3.5e9)
        assert match.timeframe == "~3.5 billion years ago"

    def test_most_recent_compares_years_not_magnitude(self) -> None:
        text = "activity 1.2 billion years ago and activity 500 million years ago"
        latest = most_recent(find_date_matches(text, ACTIVITY_RULES))
        assert latest is not None
        assert latest.years == pytest.approx(5e8)

    def test_non_numeric_magnitude_skipped(self) -> None:
        assert find_date_matches("formed ... billion years ago", FORMATION_RULES) == []

    def test_no_matches(self) -> None:
        assert most_recent([]) is None

    def test_custom_rule(self) -> None:
        rule = DateRule(
            "dated", re.compile(r"dated to ([\d.]+) (billion|million) years ago", re.IGNORECASE)
        )
        [match] = find_date_matches("Lavas dated to 2 million years ago.", [rule])
        assert match.rule == "dated"
        assert match.years == pytest.approx(2e6)


class TestParseInfobox:
    def test_fields(self) -> None:
        wikitext = (
            "{{Infobox volcano\n"
            "| name = Olympus Mons\n"
            "| age = 3.5 billion years\n"
            "| last_eruption = 25 million years ago\n"
            "}}\nBody text"
        )
        assert parse_infobox(wikitext) == {
            "age": "3.5 billion years",
            "last_eruption": "25 million years ago",
        }

    def test_no_infobox(self) -> None:
        assert parse_infobox("Just prose.") == {}

    def test_blank_field_dropped(self) -> None:
        assert parse_infobox("{{Infobox crater\n| formed = \n| name = X\n}}") == {}


class TestBuildEvents:
    feature = Feature("Olympus Mons", "Mons", 18.65, -133.8, diameter_km=600.0)

    def test_text_derived_events(self, olympus_page: KnowledgeBasePage) -> None:
        events = build_knowledge_base_events(olympus_page, self.feature, "MARS")
        assert [e.phase for e in events] == [
            PHASE_FORMATION,
            PHASE_LAST_MAJOR_ACTIVITY,
            PHASE_CURRENT_STATE,
        ]
        formation, activity, current = events
        assert formation.years == pytest.approx(3.5e9)
        assert formation.source == SOURCE_KNOWLEDGE_BASE
        assert activity.years == pytest.approx(2.5e7)
        assert current.years == 0
        assert current.description == "Olympus Mons is a large shield volcano on Mars."
        assert current.url == olympus_page.url

    def test_infobox_takes_precedence(self) -> None:
        page = _page(
            "It formed about 1 billion years ago.",
            infobox={"age": "3.7 billion years", "last_eruption": "2 million years ago"},
        )
        formation, eruption, _ = build_knowledge_base_events(page, self.feature, "MARS")
        assert formation.years == pytest.approx(3.7e9)
        assert formation.source == SOURCE_KNOWLEDGE_BASE_INFOBOX
        assert eruption.phase == PHASE_LAST_ERUPTION
        assert eruption.years == pytest.approx(2e6)

    def test_unparseable_infobox_falls_back_to_text(self) -> None:
        page = _page("It formed about 2 billion years ago.", infobox={"age": "Noachian"})
        formation = build_knowledge_base_events(page, self.feature, "MARS")[0]
        assert formation.years == pytest.approx(2e9)

    def test_formation_falls_back_to_estimate(self) -> None:
        crater = Feature("Big", "Crater", 0.0, 0.0, diameter_km=120.0)
        formation = build_knowledge_base_events(_page("A crater."), crater, "MARS")[0]
        assert formation.years == pytest.approx(4.0e9)
        assert formation.source == SOURCE_ESTIMATED

    def test_volcanism_midpoint(self) -> None:
        page = _page("The shield volcano formed about 3 billion years ago from lava flows.")
        events = build_knowledge_base_events(page, self.feature, "MARS")
        assert events[1].phase == PHASE_MAJOR_ACTIVITY
        assert events[1].years == pytest.approx(1.5e9)
        assert events[1].source == SOURCE_ESTIMATED

    def test_no_activity_event_without_volcanism(self) -> None:
        page = _page("An impact crater formed about 3 billion years ago.")
        events = build_knowledge_base_events(page, self.feature, "MARS")
        assert [e.phase for e in events] == [PHASE_FORMATION, PHASE_CURRENT_STATE]

    def test_current_state_from_full_text_when_no_intro(self) -> None:
        page = _page("First sentence here. Second sentence.")
        current = build_knowledge_base_events(page, self.feature, "MARS")[-1]
        assert current.description == "First sentence here."
