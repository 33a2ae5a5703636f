"""
Study: who survives the lending game?

Run: python -m lending_game.studies.observe

Every scenario runs in turn. Watch the counts, then the energies.
"""

from __future__ import annotations
from typing import Dict, List, Optional

from lending_game.config import RosterEntry, SimulationConfig, run_simulation
from lending_game.environments.simulation import RoundRecord
from lending_game.observations.report import RecordingReporter


SCENARIOS: Dict[str, Dict] = {
    "trackers_vs_defectors": {
        "description": "Optimistic reputation trackers against pure defectors",
        "roster": [
            RosterEntry("reputation_tracker", 32, {"optimistic": True}),
            RosterEntry("always_defect", 16),
        ],
    },
    "pessimists": {
        "description": "Trackers that never lend to strangers",
        "roster": [
            RosterEntry("reputation_tracker", 16, {"optimistic": True}),
            RosterEntry("reputation_tracker", 16, {"optimistic": False}),
            RosterEntry("always_defect", 8),
        ],
    },
    "mixed_market": {
        "description": "Everyone at once",
        "roster": [
            RosterEntry("reputation_tracker", 16),
            RosterEntry("always_cooperate", 8),
            RosterEntry("coin_flip", 8),
            RosterEntry("always_defect", 8),
        ],
    },
    "revenge": {
        "description": "Trackers that defect on lenders they distrust",
        "roster": [
            RosterEntry("reputation_tracker", 16, {"revenging": True, "label": "revenging tracker"}),
            RosterEntry("reputation_tracker", 16),
            RosterEntry("always_defect", 8),
        ],
    },
}


def run_study(
    scenario: str = "trackers_vs_defectors",
    rounds: int = 20,
    seed: Optional[int] = 42,
    plot_path: Optional[str] = None
) -> List[RoundRecord]:
    """Run one scenario and print what happened to each strategy."""
    if scenario not in SCENARIOS:
        raise KeyError(f"Unknown scenario: {scenario}. Available: {list(SCENARIOS.keys())}")

    scenario_config = SCENARIOS[scenario]

    print("=" * 50)
    print(f"Study: {scenario}")
    print("=" * 50)
    print(f"\n{scenario_config['description']}")
    print("-" * 50)

    config = SimulationConfig(roster=scenario_config["roster"], rounds=rounds, seed=seed)
    reporter = RecordingReporter()
    records = run_simulation(config, reporter)

    print(f"\nStarted with {len(reporter.population)} agents, ran {rounds} rounds")

    initial = {s.label: s for s in records[0].stats}
    final = {s.label: s for s in records[-1].stats}
    for label in sorted(initial):
        start = initial[label]
        end = final.get(label)
        if end is None:
            print(f"  {label}: {start.count} -> extinct")
        else:
            print(
                f"  {label}: {start.count} -> {end.count} agents, "
                f"mean energy {start.mean_energy:.1f} -> {end.mean_energy:.1f}"
            )

    if plot_path:
        from lending_game.observations.visualize import plot_energy_history
        plot_energy_history(records, save_path=plot_path, title=scenario)

    return records


def main():
    for scenario in SCENARIOS:
        run_study(scenario)
        print()


if __name__ == "__main__":
    main()
