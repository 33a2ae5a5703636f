"""
Studies: structured experiments for understanding.

Each study begins with observation, not hypothesis.

Scenarios:
1. trackers_vs_defectors - the default roster
2. pessimists - trackers that trust no one they have not met
3. mixed_market - trackers, cooperators, coin flips, and defectors
4. revenge - trackers that defect back on lenders they distrust
"""
