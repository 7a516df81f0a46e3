from ldpsuite.coverage import RequirementTracker


class TestRequirementTracker:
    def test_first_claim_succeeds(self) -> None:
        tracker = RequirementTracker()

        assert tracker.try_claim("spec#1") is True

    def test_second_claim_fails(self) -> None:
        tracker = RequirementTracker()
        _ = tracker.try_claim("spec#1")

        assert tracker.try_claim("spec#1") is False

    def test_distinct_uris_are_independent(self) -> None:
        tracker = RequirementTracker()

        assert tracker.try_claim("spec#1") is True
        assert tracker.try_claim("spec#2") is True
        assert len(tracker) == 2

    def test_contains_reports_claimed_uris(self) -> None:
        tracker = RequirementTracker()
        _ = tracker.try_claim("spec#1")

        assert "spec#1" in tracker
        assert "spec#2" not in tracker

    def test_new_tracker_is_empty(self) -> None:
        assert len(RequirementTracker()) == 0
