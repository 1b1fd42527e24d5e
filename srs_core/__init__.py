"""
srs-core: SM-2 review scheduling for vocabulary flashcards.

Packages:
    srs_core.sm2        - scheduling algorithm, card model, due queue, mastery
    srs_core.analytics  - study statistics over cards and review events
"""
