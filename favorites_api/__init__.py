"""SWAPI Favorites API: named favorite lists of Star Wars films, with
character export to spreadsheets.

Invariants:
    - Package root contains no executable code (no import side-effects)
"""
