"""
Tests for environments/simulation.py

Population generation, pair order, culling, full runs.
"""

import numpy as np
import pytest

from lending_game.core.agent import Agent
from lending_game.core.errors import InvariantViolation, StrategyConstructionError
from lending_game.environments.simulation import LendingSimulation, generate_agents
from lending_game.observations.report import RecordingReporter
from lending_game.strategies.randomized import always_defect, always_cooperate
from lending_game.strategies.reputation import ReputationTracker

from conftest import ScriptedStrategy


class TestGenerateAgents:
    """Tests for population generation."""

    def test_ids_are_unique_and_monotonic(self):
        agents = generate_agents([(ReputationTracker, 3), (always_defect, 2)])
        assert [a.id for a in agents] == [0, 1, 2, 3, 4]
        assert [a.type_label for a in agents] == ["reputation tracker"] * 3 + ["pure evil"] * 2

    def test_initial_energy(self):
        agents = generate_agents([(always_defect, 2)], initial_energy=10.0)
        assert all(a.energy == 10.0 for a in agents)

    def test_each_agent_owns_its_strategy(self):
        agents = generate_agents([(ReputationTracker, 2)])
        assert agents[0].strategy is not agents[1].strategy

    def test_zero_count(self):
        assert generate_agents([(ReputationTracker, 0)]) == []

    def test_negative_count(self):
        with pytest.raises(ValueError):
            generate_agents([(ReputationTracker, -1)])

    def test_failing_factory_aborts(self):
        def broken():
            raise RuntimeError("no strategy today")

        with pytest.raises(StrategyConstructionError) as excinfo:
            generate_agents([(ReputationTracker, 2), (broken, 1)])
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    def test_factory_must_return_strategy(self):
        with pytest.raises(StrategyConstructionError):
            generate_agents([(lambda: "not a strategy", 1)])


class TestLendingSimulation:
    """Tests for the round loop."""

    def test_duplicate_ids_rejected(self):
        agents = [Agent(1, always_defect()), Agent(1, always_defect())]
        with pytest.raises(InvariantViolation):
            LendingSimulation(agents)

    def test_pair_order(self, call_log):
        """(i lends to j) then (j lends to i), pairs in ascending index order."""
        agents = [Agent(i, ScriptedStrategy(i, call_log)) for i in range(3)]
        LendingSimulation(agents).play_round()

        requests = [(lender, borrower) for call, lender, borrower, *_ in call_log
                    if call == "accept_or_reject_request"]
        assert requests == [(0, 1), (1, 0), (0, 2), (2, 0), (1, 2), (2, 1)]

    def test_everyone_lends_once_to_everyone(self, call_log):
        agents = [Agent(i, ScriptedStrategy(i, call_log)) for i in range(4)]
        LendingSimulation(agents).play_round()
        # 3 loans given (-1 each) and 3 taken (+2 each)
        assert all(a.energy == 256.0 + 3 * (-1.0) + 3 * 2.0 for a in agents)

    def test_culling_boundary(self):
        """Exactly zero dies; a sliver survives."""
        agents = [
            Agent(0, always_defect(), energy=0.0),
            Agent(1, always_defect(), energy=0.0001),
            Agent(2, always_defect(), energy=-4.0),
        ]
        simulation = LendingSimulation(agents)
        simulation.step()
        assert [a.id for a in simulation.agents] == [1]
        assert simulation.agents[0].energy == 0.0001

    def test_cull_returns_removed(self):
        agents = [Agent(0, always_defect(), energy=-1.0), Agent(1, always_defect())]
        removed = LendingSimulation(agents).cull()
        assert [a.id for a in removed] == [0]

    def test_death_takes_effect_after_the_round(self):
        """An agent driven below zero keeps playing until the round ends."""
        doomed = Agent(0, ReputationTracker(), energy=2.0)
        defector = Agent(1, always_defect())
        cooperator = Agent(2, always_cooperate())
        simulation = LendingSimulation([doomed, defector, cooperator])

        simulation.step()

        # doomed: -3 (defected on), -1 (lends to cooperator), +2 (borrows from it)
        assert doomed.energy == 0.0
        assert cooperator.energy == 254.0
        assert defector.energy == 262.0
        assert [a.id for a in simulation.agents] == [1, 2]

    def test_empty_population(self):
        """Extinction is not an error."""
        reporter = RecordingReporter()
        records = LendingSimulation([], reporter=reporter).run(3)
        assert len(records) == 4
        assert all(r.stats == [] and r.population == 0 for r in records)
        assert [round_index for round_index, _ in reporter.rounds] == [0, 1, 2]

    def test_negative_rounds(self):
        with pytest.raises(ValueError):
            LendingSimulation([]).run(-1)

    def test_report_comes_before_encounters(self):
        reporter = RecordingReporter()
        agents = [Agent(0, always_cooperate()), Agent(1, always_cooperate())]
        LendingSimulation(agents, reporter=reporter).run(1)

        round_index, stats = reporter.rounds[0]
        assert round_index == 0
        assert stats[0].mean_energy == 256.0
        assert reporter.final[0].mean_energy == 257.0
        assert reporter.population == [(0, 256.0, "pure good"), (1, 256.0, "pure good")]

    def test_outcomes_recorded(self):
        agents = [Agent(0, ReputationTracker()), Agent(1, always_defect())]
        record = LendingSimulation(agents).step()
        assert record.outcomes == {"rejected": 1, "cooperated": 0, "defected": 1}

    def test_get_energies(self):
        agents = [Agent(0, always_defect(), energy=3.0), Agent(1, always_defect(), energy=4.0)]
        np.testing.assert_array_equal(LendingSimulation(agents).get_energies(), [3.0, 4.0])


class TestScenarios:
    """Whole runs with known answers."""

    def test_tracker_against_defector(self):
        """The tracker lends once, is robbed, and never lends again."""
        tracker = Agent(0, ReputationTracker(optimistic=True))
        defector = Agent(1, always_defect())
        records = LendingSimulation([tracker, defector]).run(3)

        assert records[0].energies == {0: 256.0, 1: 256.0}
        assert records[1].energies == {0: 253.0, 1: 259.0}
        assert records[2].energies == {0: 253.0, 1: 259.0}
        assert records[-1].energies == {0: 253.0, 1: 259.0}
        assert tracker.strategy.score_for(1) == -3.0
        assert records[1].outcomes == {"rejected": 2, "cooperated": 0, "defected": 0}

    def test_mutual_trackers_scores_never_fall_between_rounds(self):
        """Observed-only-cooperation keeps a peer's score non-decreasing round to round."""
        a = Agent(0, ReputationTracker())
        b = Agent(1, ReputationTracker())
        simulation = LendingSimulation([a, b])

        scores = []
        for _ in range(10):
            simulation.step()
            scores.append(a.strategy.score_for(1))

        assert scores == sorted(scores)
        assert scores[0] == 1.0
        assert a.energy == b.energy == 266.0

    def test_deterministic_population_repeats_exactly(self):
        def build():
            agents = generate_agents([
                (ReputationTracker, 5),
                (lambda: ReputationTracker(optimistic=False), 2),
                (always_defect, 3),
                (always_cooperate, 2),
            ])
            reporter = RecordingReporter()
            return LendingSimulation(agents, reporter=reporter).run(15), reporter

        records_a, reporter_a = build()
        records_b, reporter_b = build()

        assert [r.energies for r in records_a] == [r.energies for r in records_b]
        assert reporter_a.rounds == reporter_b.rounds
        assert reporter_a.final == reporter_b.final
