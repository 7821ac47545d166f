"""Property-based tests for zone determinism.

Properties:
- GoodZone returns the magic value for every input
- BadZone approves iff the first identifier equals the sentinel; every
  other input gets the zero-length response
- Decisions and raw responses agree through interpret_response
- Metadata is independent of prior validate_order calls

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from orderfuzz.constants import VALID_ORDER_MAGIC
from orderfuzz.orders import ZoneParameters
from orderfuzz.zones import BadZone, Decision, GoodZone, interpret_response
from tests.strategies.orders import identifiers, zone_parameters, zone_parameters_for


class TestGoodZoneProperties:
    @given(params=zone_parameters(min_consideration=0))
    def test_always_magic(self, params: ZoneParameters) -> None:
        assert GoodZone().validate_order(params) == VALID_ORDER_MAGIC

    @given(first=zone_parameters(), second=zone_parameters())
    def test_same_marker_for_any_two_inputs(
        self, first: ZoneParameters, second: ZoneParameters
    ) -> None:
        zone = GoodZone()
        assert zone.validate_order(first) == zone.validate_order(second)


class TestBadZoneProperties:
    @given(data=st.data(), sentinel=identifiers)
    def test_approves_iff_sentinel(self, data: st.DataObject, sentinel: int) -> None:
        params = data.draw(zone_parameters_for(sentinel))
        zone = BadZone(expected_identifier=sentinel)

        response = zone.validate_order(params)

        if params.consideration[0].identifier == sentinel:
            assert response == VALID_ORDER_MAGIC
        else:
            assert response == b""

    @given(params=zone_parameters())
    def test_decision_matches_response(self, params: ZoneParameters) -> None:
        zone = BadZone()
        decision = zone.decide(params)
        event(f"decision={decision}")
        assert interpret_response(zone.validate_order(params)) is decision

    @given(params=zone_parameters())
    def test_deterministic(self, params: ZoneParameters) -> None:
        zone = BadZone()
        assert zone.validate_order(params) == zone.validate_order(params)
        assert zone.decide(params) is BadZone().decide(params)

    @given(params=zone_parameters())
    def test_never_raises_for_well_formed_input(self, params: ZoneParameters) -> None:
        assert BadZone().decide(params) in (Decision.APPROVED, Decision.REJECTED)


class TestMetadataProperties:
    @given(calls=st.lists(zone_parameters(), max_size=5))
    def test_metadata_unaffected_by_calls(self, calls: list[ZoneParameters]) -> None:
        for zone in (GoodZone(), BadZone()):
            before = zone.get_seaport_metadata()
            for params in calls:
                zone.validate_order(params)
            assert zone.get_seaport_metadata() == before
