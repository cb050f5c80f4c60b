"""
scoring/ - Leadership Assessment Scoring Engine

Modules:
    utils.py               - Decimal utilities
    question_catalog.py    - Immutable question catalog snapshots + JSON export/import
    dimension_scorer.py    - Raw answers -> per-dimension scores for one rater
    bands.py               - Dimension display metadata and category banding
    profile_classifier.py  - First-match profile tables (achiever / archetype)
    aggregator.py          - Normalized scores, awareness metrics, profile label
"""
