"""Static rule tables, one JSON file per language."""
