import pytest

from loadstart.models import (
    LabelSelector,
    LoadTestJobSpec,
    LoadTestJobStatus,
    PodPhase,
    RunnerPod,
    ObjectMeta,
    Stage,
)


class TestStage:

    def test_stages_only_advance(self) -> None:
        assert Stage.CREATED.advances_to(Stage.STARTED) is True
        assert Stage.STARTED.advances_to(Stage.CREATED) is False
        assert Stage.STARTED.advances_to(Stage.STARTED) is False

    def test_at_or_past(self) -> None:
        assert Stage.STARTED.at_or_past(Stage.STARTED) is True
        assert Stage.FINISHED.at_or_past(Stage.STARTED) is True
        assert Stage.CREATED.at_or_past(Stage.STARTED) is False
        assert Stage.UNSET.at_or_past(Stage.STARTED) is False

    def test_parse(self) -> None:
        assert Stage.parse("started") == Stage.STARTED
        assert Stage.parse(None) == Stage.UNSET
        assert Stage.parse("") == Stage.UNSET
        assert LoadTestJobStatus(stage="created").stage == Stage.CREATED

        with pytest.raises(ValueError):
            Stage.parse("paused")


class TestLoadTestJobSpec:

    @pytest.mark.parametrize("parallelism", [0, -1])
    def test_parallelism_must_be_positive(self, parallelism: int) -> None:
        with pytest.raises(ValueError):
            LoadTestJobSpec(parallelism=parallelism)


class TestRunnerPod:

    def test_phase_from_string(self) -> None:
        pod = RunnerPod(metadata=ObjectMeta(name="runner"), phase="Running")

        assert pod.phase == PodPhase.RUNNING
        assert pod.running is True


class TestLabelSelector:

    def test_matches_all_labels(self) -> None:
        selector = LabelSelector.from_labels({"app": "loadstart", "runner": "true"})

        assert selector.matches({"app": "loadstart", "runner": "true", "extra": "x"}) is True
        assert selector.matches({"app": "loadstart"}) is False
        assert selector.matches({"app": "other", "runner": "true"}) is False

    def test_empty_selector_matches_everything(self) -> None:
        assert LabelSelector().matches({}) is True

    def test_string_form(self) -> None:
        selector = LabelSelector.from_labels({"runner": "true", "app": "loadstart"})

        assert str(selector) == "app=loadstart,runner=true"
